import json
import logging

import pytest
import requests
from requests.adapters import BaseAdapter


class StubAdapter(BaseAdapter):
    """Transport adapter answering every request with a canned response."""

    def __init__(self, status=200, reason="OK", body=None):
        super().__init__()
        self.status = status
        self.reason = reason
        self.body = body if body is not None else {}
        self.requests = []
        self.closed = False

    def send(self, request, **kwargs):
        self.requests.append(request)

        response = requests.Response()
        response.status_code = self.status
        response.reason = self.reason
        response.url = request.url
        response.request = request
        response.headers["Content-Type"] = "application/json"
        response.encoding = "utf-8"
        if isinstance(self.body, (bytes, str)):
            response._content = self.body.encode() if isinstance(self.body, str) else self.body
        else:
            response._content = json.dumps(self.body).encode("utf-8")
        return response

    def close(self):
        self.closed = True


class StubServer:
    """Replaces requests.Session so every session created talks to a StubAdapter."""

    def __init__(self, monkeypatch):
        self.adapter = StubAdapter()
        self.sessions = []
        session_cls = requests.Session

        def make_session():
            session = session_cls()
            session.mount("https://", self.adapter)
            session.mount("http://", self.adapter)
            self.sessions.append(session)
            return session

        monkeypatch.setattr(requests, "Session", make_session)

    def respond(self, body=None, status=200, reason="OK"):
        self.adapter.body = body
        self.adapter.status = status
        self.adapter.reason = reason

    @property
    def requests(self):
        return self.adapter.requests


@pytest.fixture()
def me_payload():
    return {
        "user_books": [
            {
                "id": 101,
                "book": {
                    "id": 7,
                    "title": "Le Petit Prince",
                    "default_edition": {"id": 70, "isbn_13": "9780156012195", "isbn_10": None},
                },
                "user_book_reads": [
                    {
                        "id": 5001,
                        "started_at": "2024-03-01",
                        "paused_at": None,
                        "finished_at": "2024-03-09",
                        "edition": {"id": 70, "isbn_13": "9780156012195", "isbn_10": None},
                    }
                ],
                "rating": 4.5,
                "reviewed_at": None,
                "review_raw": "Émouvant.",
                "review_has_spoilers": False,
                "private_notes": None,
            }
        ],
        "lists": [
            {"id": 3, "name": "Favourites", "list_books": [{"id": 33, "book": {"id": 7, "title": "Le Petit Prince", "default_edition": None}}]}
        ],
    }


@pytest.fixture()
def graphql_server(monkeypatch):
    return StubServer(monkeypatch)


@pytest.fixture()
def stub_adapter():
    return StubAdapter()


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("hardcover_sync")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
