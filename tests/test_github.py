import base64

import pytest

from conftest import FakeSession
from gitup.errors import GitHubAPIError, GitHubAuthError, GitHubNetworkError, UniqueNameError
from gitup.handlers import github as gh


def test_mask():
    assert gh._mask(None) == "(not set)"
    assert gh._mask("short") == "********"
    assert gh._mask("ghp_abcdefghijkl") == "ghp_********ijkl"


def test_headers_omit_auth_without_token():
    assert "Authorization" not in gh._api_headers("")
    assert gh._api_headers("tok")["Authorization"] == "token tok"


def test_path_exists_status_mapping():
    s = FakeSession(existing={"img/photo.png"})
    assert gh.path_exists(s, "o", "r", "img/photo.png", "t") is True
    assert gh.path_exists(s, "o", "r", "img/other.png", "t") is False
    method, url, headers, params, timeout, _ = s.calls[0]
    assert method == "HEAD"
    assert url == "https://api.github.com/repos/o/r/contents/img/photo.png"
    assert timeout == gh.TIMEOUT


@pytest.mark.parametrize("status", [401, 403])
def test_path_exists_auth_error(status):
    with pytest.raises(GitHubAuthError) as exc:
        gh.path_exists(FakeSession(head_status=status), "o", "r", "a.txt", "t")
    assert exc.value.status_code == status


def test_path_exists_unexpected_status():
    with pytest.raises(GitHubAPIError) as exc:
        gh.path_exists(FakeSession(head_status=500), "o", "r", "a.txt", "t")
    assert exc.value.status_code == 500


def test_path_exists_network_error(connection_error):
    with pytest.raises(GitHubNetworkError):
        gh.path_exists(FakeSession(error=connection_error), "o", "r", "a.txt", "t")


def test_ensure_unique_path_free():
    s = FakeSession()
    assert gh.ensure_unique_path(s, "o", "r", "img", "photo.png", "t") == "img/photo.png"
    assert len(s.calls) == 1


def test_ensure_unique_path_collisions():
    s = FakeSession(existing={"img/photo.png"})
    assert gh.ensure_unique_path(s, "o", "r", "img", "photo.png", "t") == "img/photo-1.png"

    s = FakeSession(existing={"img/photo.png", "img/photo-1.png"})
    assert gh.ensure_unique_path(s, "o", "r", "img", "photo.png", "t") == "img/photo-2.png"
    assert len(s.calls) == 3


def test_ensure_unique_path_without_extension():
    s = FakeSession(existing={"files/readme"})
    assert gh.ensure_unique_path(s, "o", "r", "files", "readme", "t") == "files/readme-1"


def test_ensure_unique_path_is_bounded():
    s = FakeSession(head_status=200)
    with pytest.raises(UniqueNameError):
        gh.ensure_unique_path(s, "o", "r", "img", "photo.png", "t", max_attempts=5)
    assert len(s.calls) == 5


def test_put_file_body():
    s = FakeSession()
    assert gh.put_file(s, "o", "r", "docs/a.txt", "t", b"hello", "Upload a.txt via GitUp") is None
    method, url, headers, _, timeout, body = s.calls[0]
    assert method == "PUT"
    assert url.endswith("/repos/o/r/contents/docs/a.txt")
    assert base64.b64decode(body["content"]) == b"hello"
    assert body["message"] == "Upload a.txt via GitUp"
    assert set(body) == {"message", "content"}
    assert headers["Authorization"] == "token t"


@pytest.mark.parametrize("status, exc_type", [
    (401, GitHubAuthError),
    (403, GitHubAuthError),
    (422, GitHubAPIError),
    (200, GitHubAPIError),
])
def test_put_file_errors(status, exc_type):
    with pytest.raises(exc_type):
        gh.put_file(FakeSession(put_status=status), "o", "r", "a.txt", "t", b"x", "m")


def test_put_file_network_error(connection_error):
    with pytest.raises(GitHubNetworkError):
        gh.put_file(FakeSession(error=connection_error), "o", "r", "a.txt", "t", b"x", "m")
