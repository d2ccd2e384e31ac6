# main.py
import argparse
import logging
import sys

from gitup.config import ConfigFile, load_config
from gitup.credentials import default_credential_store
from gitup.errors import (
    ConfigError,
    GitUpError,
    InvalidFileError,
    RepositoryFormatError,
)
from gitup.handlers.upload import DEFAULT_BRANCH, Uploader, validate_input_file
from gitup.shell import run as shell_run

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    ap = _Parser(
        prog="gitup",
        usage="%(prog)s [options] <file-path>",
        description="Upload a file to GitHub and print a markdown link to it.",
    )
    ap.add_argument("-config", "--config", dest="config", action="store_true", help="configure GitUp")
    ap.add_argument("-v", "--verbose", dest="verbose", action="store_true", help="enable verbose logging")
    ap.add_argument("-branch", "--branch", dest="branch", default=DEFAULT_BRANCH,
                    help="git branch for uploaded files (default: %(default)s)")
    ap.add_argument("file", nargs="?", metavar="file-path")
    return ap


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    # keep urllib3 connection chatter out of -v output
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _fail(msg: str, *hints: str) -> int:
    print(msg, file=sys.stderr)
    for hint in hints:
        print(hint, file=sys.stderr)
    return 1


def main(argv=None, config_file=None, credentials=None, session=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    _setup_logging(args.verbose)

    config_file = config_file or ConfigFile()
    credentials = credentials or default_credential_store()

    if args.config:
        try:
            shell_run(config_file, credentials)
        except GitUpError as e:
            return _fail(f"Error saving config: {e}")
        return 0

    if not args.file:
        ap.print_usage(sys.stderr)
        return 1

    try:
        validate_input_file(args.file)
    except InvalidFileError as e:
        return _fail(f"Invalid file: {e}")

    try:
        config = load_config(config_file, credentials)
    except RepositoryFormatError as e:
        return _fail(f"Invalid repository: {e}")
    except ConfigError as e:
        return _fail(f"Error loading config: {e}", "Run 'gitup -config' first")

    with Uploader(config, branch=args.branch, session=session) as uploader:
        try:
            result = uploader.upload(args.file)
        except InvalidFileError as e:
            return _fail(f"Invalid file: {e}")
        except GitUpError as e:
            return _fail(f"Upload failed: {e}")

    print(result.markdown)
    return 0


if __name__ == "__main__":
    sys.exit(main())
