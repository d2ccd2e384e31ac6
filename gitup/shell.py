# gitup/shell.py
from typing import Callable, Optional

from .banner import ok, print_banner
from .config import ConfigFile
from .credentials import CredentialStore
from .errors import ConfigError, CredentialStoreError
from .state import Config, validate_repository

TOKEN_PROMPT = "Enter your GitHub Personal Access Token: "
REPO_PROMPT = "Enter repository (owner/repo): "


def _read(input_fn: Callable[[str], str], prompt: str, what: str) -> str:
    try:
        return input_fn(prompt).strip()
    except EOFError:
        print("")
        raise ConfigError(f"no {what} entered")


def run(config_file: ConfigFile, credentials: CredentialStore,
        input_fn: Optional[Callable[[str], str]] = None) -> Config:
    """
    Interactive setup: prompt for token and repository, then persist them.

    The token goes to the secure credential store when one accepts it and is
    blanked in the config file; otherwise it is written to the file.
    """
    input_fn = input_fn or input
    print_banner()

    config = Config()
    config.token = _read(input_fn, TOKEN_PROMPT, "token")
    if not config.token:
        raise ConfigError("token must not be empty")

    config.repository = _read(input_fn, REPO_PROMPT, "repository")
    validate_repository(config.repository)

    to_file = Config(token=config.token, repository=config.repository)
    try:
        credentials.save(config.token)
    except CredentialStoreError as e:
        print(f"Warning: Could not save to keychain: {e}")
        print("Token will be saved in config file instead")
    else:
        print(ok("Token saved to secure credential store"))
        to_file.token = ""

    config_file.save(to_file)
    print(ok("Configuration saved!"))
    return config
