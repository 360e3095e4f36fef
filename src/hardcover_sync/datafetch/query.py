import importlib.resources as pkg_resources

OPERATION_NAME = "MyData"


def _load_query():
    """
    Reads the packaged MyData query document.
    :return: GraphQL query text.
    """
    query_file = pkg_resources.files("hardcover_sync.datafetch").joinpath("my_data_query.graphql")

    with query_file.open("r", encoding="utf-8") as file:
        return file.read()


QUERY = _load_query()


def build_request_body():
    """Returns the JSON body sent to the GraphQL endpoint."""
    return {"query": QUERY, "operationName": OPERATION_NAME}
