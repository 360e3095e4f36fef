import time
from dataclasses import dataclass
from datetime import datetime

from hardcover_sync.backup.writer import BackupWriter
from hardcover_sync.datafetch.data_fetch import DataFetch, GRAPHQL_ENDPOINT
from hardcover_sync.datafetch.query import build_request_body
from hardcover_sync.translators.envelope import unwrap_me


@dataclass(frozen=True)
class SyncResult:
    path: str
    took: float
    finished_at: datetime


def format_duration(seconds):
    """Renders elapsed seconds as e.g. `850ms`, `1.204s` or `2m 3.5s`."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.3f}s"
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}m {rest:.1f}s"


def run_sync(auth_token, output_dir, debug=False, endpoint=GRAPHQL_ENDPOINT, session=None, now=datetime.now):
    """
    Downloads the user's Hardcover data and replaces the contents of `output_dir` with it.

    Nothing on disk is touched until the response has been validated.

    :param auth_token: Bearer token.
    :param output_dir: Backup directory.
    :param debug: Enable HTTP-level logging.
    :param endpoint: GraphQL endpoint URL.
    :param session: Optional requests.Session, left open.
    :param now: Clock used for the completion timestamp.
    :return: SyncResult
    """
    start = time.perf_counter()

    with DataFetch(auth_token, endpoint=endpoint, session=session, debug=debug) as fetcher:
        body = fetcher.fetch_data(build_request_body())

    me = unwrap_me(body)
    path = BackupWriter(output_dir).write(me)

    took = time.perf_counter() - start
    return SyncResult(path=path, took=took, finished_at=now())
