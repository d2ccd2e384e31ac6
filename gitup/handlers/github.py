# gitup/handlers/github.py
from typing import Optional

import base64
import logging
import posixpath

import requests

from ..errors import (
    GitHubAPIError,
    GitHubAuthError,
    GitHubNetworkError,
    UniqueNameError,
)
from ..naming import split_extension

logger = logging.getLogger(__name__)

API_URL = "https://api.github.com"
USER_AGENT = "GitUp/1.0"
TIMEOUT = 15             # seconds, every call
MAX_NAME_ATTEMPTS = 100  # probes before giving up on a free name

MASK = "********"


def _mask(token: Optional[str]) -> str:
    if not token:
        return "(not set)"
    return token[:4] + MASK + token[-4:] if len(token) > 8 else MASK


def _api_headers(token: Optional[str]) -> dict:
    headers = {
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": USER_AGENT,
    }
    if token:
        headers["Authorization"] = f"token {token}"
    return headers


def _contents_url(owner: str, repo: str, path: str) -> str:
    return f"{API_URL}/repos/{owner}/{repo}/contents/{path}"


def path_exists(session: requests.Session, owner: str, repo: str, path: str,
                token: Optional[str]) -> bool:
    """HEAD the contents endpoint: 200 means taken, 404 means free."""
    url = _contents_url(owner, repo, path)
    logger.debug("HEAD %s (token %s)", url, _mask(token))
    try:
        r = session.head(url, headers=_api_headers(token), timeout=TIMEOUT)
    except requests.RequestException as e:
        raise GitHubNetworkError(f"network error while checking path ({path}): {e}") from e

    if r.status_code == 200:
        return True
    if r.status_code == 404:
        return False
    if r.status_code in (401, 403):
        raise GitHubAuthError(
            f"GitHub API auth error while checking path ({path}): {r.status_code} {r.reason}",
            r.status_code,
        )
    raise GitHubAPIError(
        f"unexpected GitHub API response while checking path ({path}): {r.status_code} {r.reason} - {r.text}",
        r.status_code,
        r.text,
    )


def put_file(session: requests.Session, owner: str, repo: str, path: str, token: Optional[str],
             content: bytes, message: str) -> None:
    url = _contents_url(owner, repo, path)
    payload = {
        "message": message,
        "content": base64.b64encode(content).decode("ascii"),
    }
    logger.debug("PUT %s (%d bytes, token %s)", url, len(content), _mask(token))
    try:
        r = session.put(url, headers=_api_headers(token), json=payload, timeout=TIMEOUT)
    except requests.RequestException as e:
        raise GitHubNetworkError(f"network error while uploading ({path}): {e}") from e

    if r.status_code == 201:
        return
    if r.status_code in (401, 403):
        raise GitHubAuthError(f"GitHub API auth error: {r.status_code} {r.reason} - {r.text}", r.status_code)
    raise GitHubAPIError(f"GitHub API error: {r.status_code} {r.reason} - {r.text}", r.status_code, r.text)


def ensure_unique_path(session: requests.Session, owner: str, repo: str, folder: str, filename: str,
                       token: Optional[str],
                       max_attempts: int = MAX_NAME_ATTEMPTS) -> str:
    """
    Return ``folder/filename``, or the first free ``folder/base-N.ext``.

    Each probe is one HEAD round trip. Raises UniqueNameError once
    ``max_attempts`` probes have all collided.
    """
    base, ext = split_extension(filename)
    candidate = filename
    for counter in range(1, max_attempts + 1):
        path = posixpath.join(folder, candidate)
        if not path_exists(session, owner, repo, path, token):
            return path
        logger.debug("%s already exists", path)
        candidate = f"{base}-{counter}{ext}"
    raise UniqueNameError(f"no free name for {folder}/{filename} after {max_attempts} attempts")
