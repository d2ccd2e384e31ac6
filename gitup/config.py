# gitup/config.py
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from .credentials import CredentialStore
from .errors import ConfigError
from .state import Config, validate_repository

logger = logging.getLogger(__name__)

CONFIG_DIR = ".gitup"
CONFIG_FILE = "config.json"


class ConfigFile:
    """The JSON config at ``~/.gitup/config.json``."""

    def __init__(self, home: Optional[Path] = None):
        self.home = Path(home) if home is not None else Path.home()

    @property
    def directory(self) -> Path:
        return self.home / CONFIG_DIR

    @property
    def path(self) -> Path:
        return self.directory / CONFIG_FILE

    def save(self, config: Config) -> None:
        try:
            self.directory.mkdir(mode=0o700, parents=True, exist_ok=True)
            os.chmod(self.directory, 0o700)
        except OSError as e:
            raise ConfigError(f"failed to create config directory: {e}") from e

        data = json.dumps(config.to_dict(), indent=2)
        tmp = None
        try:
            # mkstemp creates the file 0600
            fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=".config-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
            os.replace(tmp, self.path)
        except OSError as e:
            if tmp is not None:
                try:
                    os.unlink(tmp)
                except OSError:
                    pass
            raise ConfigError(f"failed to write config file: {e}") from e
        logger.debug("wrote config to %s", self.path)

    def load(self) -> Config:
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise ConfigError(f"could not read {self.path}: {e.strerror or e}") from e
        try:
            # UnicodeDecodeError is a ValueError
            data = json.loads(raw.decode("utf-8"))
        except ValueError as e:
            raise ConfigError(f"malformed config file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"malformed config file {self.path}: expected a JSON object")
        return Config(
            token=str(data.get("token") or ""),
            repository=str(data.get("repository") or ""),
        )


def load_config(config_file: ConfigFile, credentials: CredentialStore) -> Config:
    config = config_file.load()
    if not config.token:
        token = credentials.load()
        if token:
            logger.debug("using token from secure credential store")
            config.token = token
    if not config.token:
        raise ConfigError("no GitHub token found in config file or credential store")
    validate_repository(config.repository)
    return config
