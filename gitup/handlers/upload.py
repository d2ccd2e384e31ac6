# gitup/handlers/upload.py
from dataclasses import dataclass
from typing import Optional

import logging
import os

import requests

from ..errors import InvalidFileError
from ..naming import format_output, raw_url, sanitize_filename, upload_folder
from ..state import Config, UploadRequest, split_repository
from . import github as gh

logger = logging.getLogger(__name__)

MAX_UPLOAD_SIZE_BYTES = 25 * 1024 * 1024  # practical limit of the contents API
DEFAULT_BRANCH = "main"
COMMIT_MESSAGE = "Upload {filename} via GitUp"


def validate_input_file(file_path: str) -> int:
    """Reject anything that is not a readable, non-empty file within the size limit. Returns the size."""
    try:
        st = os.stat(file_path)
    except OSError as e:
        raise InvalidFileError(f"could not access file: {e.strerror or e}") from e
    if os.path.isdir(file_path):
        raise InvalidFileError("expected a file but found a directory")
    if st.st_size == 0:
        raise InvalidFileError("file is empty")
    if st.st_size > MAX_UPLOAD_SIZE_BYTES:
        raise InvalidFileError(f"file exceeds maximum upload size of {MAX_UPLOAD_SIZE_BYTES} bytes")
    return st.st_size


def build_request(file_path: str, branch: str = DEFAULT_BRANCH) -> UploadRequest:
    filename = sanitize_filename(os.path.basename(file_path))
    return UploadRequest(
        local_path=file_path,
        filename=filename,
        folder=upload_folder(filename),
        branch=branch,
    )


@dataclass
class UploadResult:
    path: str
    url: str
    markdown: str


class Uploader:
    """
    Uploads one local file per call. ``branch`` only shapes the raw URL; the
    write itself lands on the repository's default branch.

    A session created here is closed by ``close()`` or on leaving a ``with``
    block; a caller-supplied session is left to its owner.
    """

    def __init__(self, config: Config, branch: str = DEFAULT_BRANCH,
                 session: Optional[requests.Session] = None):
        self.config = config
        self.branch = branch or DEFAULT_BRANCH
        self._owns_session = session is None
        self.session = requests.Session() if session is None else session

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def upload(self, file_path: str) -> UploadResult:
        req = build_request(file_path, self.branch)
        validate_input_file(req.local_path)
        try:
            with open(req.local_path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise InvalidFileError(f"failed to read file: {e.strerror or e}") from e
        # the file may have changed since the stat
        if not data:
            raise InvalidFileError("file is empty")
        if len(data) > MAX_UPLOAD_SIZE_BYTES:
            raise InvalidFileError(f"file exceeds maximum upload size of {MAX_UPLOAD_SIZE_BYTES} bytes")

        owner, repo = split_repository(self.config.repository)
        original = os.path.basename(req.local_path)
        logger.info("sanitized %r to %r, folder %s", original, req.filename, req.folder)

        path = gh.ensure_unique_path(
            self.session, owner, repo, req.folder, req.filename, self.config.token,
        )
        logger.info("uploading %s to %s/%s:%s", original, owner, repo, path)
        gh.put_file(
            self.session, owner, repo, path, self.config.token, data,
            COMMIT_MESSAGE.format(filename=original),
        )

        url = raw_url(owner, repo, req.branch, path)
        return UploadResult(path=path, url=url, markdown=format_output(original, url))
