import logging
import sys
from typing import Any

_logger = logging.getLogger('wslconv')

_format = '%(levelname)s: %(message)s'
_format_detail = '%(levelname)s %(module)s:%(lineno)d: %(message)s'


def init(level: str = 'WARNING') -> None:
    """ Send wslconv records to stderr at the given level name. """

    for handler in _logger.handlers[:]:
        _logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_format))

    _logger.addHandler(handler)
    _logger.setLevel(level)
    _logger.propagate = False


def set_detail(detail: int) -> None:
    fmt = _format_detail if detail > 0 else _format

    for handler in _logger.handlers:
        handler.setFormatter(logging.Formatter(fmt))


def debug(msg: str, *args: Any) -> None:
    _logger.debug(msg, *args, stacklevel=2)


def info(msg: str, *args: Any) -> None:
    _logger.info(msg, *args, stacklevel=2)


def warning(msg: str, *args: Any) -> None:
    _logger.warning(msg, *args, stacklevel=2)


def error(msg: str, *args: Any) -> None:
    _logger.error(msg, *args, stacklevel=2)


def eprint(*args: Any, **kwargs: Any) -> None:
    print(*args, file=sys.stderr, **kwargs)
