import pathlib
import sys

import pytest
import requests

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from gitup.config import ConfigFile
from gitup.credentials import MemoryCredentialStore
from gitup.state import Config


class FakeResponse:
    def __init__(self, status_code, body=None, reason=""):
        self.status_code = status_code
        self.reason = reason
        self._body = body

    @property
    def text(self):
        return "" if self._body is None else str(self._body)

    def json(self):
        if not isinstance(self._body, dict):
            raise ValueError("no json")
        return self._body


class FakeSession:
    """Stands in for requests.Session. ``existing`` holds repo paths that answer 200."""

    def __init__(self, existing=(), head_status=None, put_status=201, error=None):
        self.existing = set(existing)
        self.head_status = head_status
        self.put_status = put_status
        self.error = error
        self.calls = []

    def _path(self, url):
        return url.split("/contents/", 1)[1]

    def head(self, url, headers=None, params=None, timeout=None):
        self.calls.append(("HEAD", url, headers, params, timeout, None))
        if self.error:
            raise self.error
        if self.head_status is not None:
            return FakeResponse(self.head_status, "nope", reason="Status")
        return FakeResponse(200 if self._path(url) in self.existing else 404)

    def put(self, url, headers=None, json=None, timeout=None):
        self.calls.append(("PUT", url, headers, None, timeout, json))
        if self.error:
            raise self.error
        if self.put_status == 201:
            return FakeResponse(201, {"content": {"path": self._path(url)}}, reason="Created")
        return FakeResponse(self.put_status, '{"message": "Bad"}', reason="Error")

    def methods(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def config():
    return Config(token="ghp_abcdefghijklmnop", repository="owner/repo")


@pytest.fixture
def config_file(tmp_path):
    return ConfigFile(home=tmp_path)


@pytest.fixture
def credentials():
    return MemoryCredentialStore()


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
