import logging
import sys

from core.utils import env_vars

DEBUG = env_vars("DEBUG", "false")
FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _handler() -> logging.Handler:
    # stderr, so nothing interleaves with the YAML printed to stdout
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT))
    return handler


class Logger:
    def __init__(self, name: str, verbose: bool = DEBUG) -> None:
        self.name = name
        self.verbose = verbose
        self._logger = logging.getLogger(name)
        if not self._logger.handlers:
            self._logger.addHandler(_handler())
        self._logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        self._logger.propagate = False

    def is_verbose(self) -> bool:
        return self.verbose

    def log(self, message: str) -> None:
        """progress lines, always shown"""
        self._logger.info(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def exception(self, message: str) -> None:
        self._logger.exception(message)
