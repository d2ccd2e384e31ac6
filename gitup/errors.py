# gitup/errors.py


class GitUpError(Exception):
    """Base class for every failure that ends a gitup invocation."""


class InvalidFileError(GitUpError):
    pass


class ConfigError(GitUpError):
    pass


class RepositoryFormatError(GitUpError):
    pass


class CredentialStoreError(GitUpError):
    pass


class GitHubError(GitUpError):
    pass


class GitHubNetworkError(GitHubError):
    pass


class GitHubAuthError(GitHubError):
    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class GitHubAPIError(GitHubError):
    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UniqueNameError(GitUpError):
    pass
