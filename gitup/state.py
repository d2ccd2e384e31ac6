# gitup/state.py
from dataclasses import dataclass

from .errors import RepositoryFormatError


def validate_repository(repo: str) -> None:
    parts = (repo or "").split("/")
    if len(parts) != 2:
        raise RepositoryFormatError("repository must be in 'owner/repo' format")
    if not parts[0] or not parts[1]:
        raise RepositoryFormatError("repository owner and name must be non-empty")


def split_repository(repo: str) -> tuple[str, str]:
    validate_repository(repo)
    owner, name = repo.split("/")
    return owner, name


@dataclass
class Config:
    token: str = ""
    # owner/repo
    repository: str = ""

    @property
    def owner(self) -> str:
        return split_repository(self.repository)[0]

    @property
    def name(self) -> str:
        return split_repository(self.repository)[1]

    def to_dict(self) -> dict:
        return {"token": self.token, "repository": self.repository}


@dataclass
class UploadRequest:
    local_path: str
    filename: str
    folder: str
    branch: str
