from typing import Optional

from . import log
from .classify import PathConvention, classify
from .convert import Options, convert
from .parse import parse
from .serialize import serialize


def to_linux(path: str, options: Optional[Options] = None) -> str:
    """ Convert a Windows path into the corresponding path inside the Linux
        environment, e.g. C:\\Users -> /mnt/c/Users. """

    return _translate(path, PathConvention.MOUNTED_LINUX, options)


def to_windows(path: str, options: Optional[Options] = None) -> str:
    """ Convert a path inside the Linux environment into the corresponding
        Windows path, e.g. /mnt/c/Users -> C:\\Users. """

    return _translate(path, PathConvention.WINDOWS_ABSOLUTE, options)


def _translate(
    path: str,
    target: PathConvention,
    options: Optional[Options]
) -> str:
    if options is None:
        options = Options()

    classified = classify(path, options.mount_root)

    # Input without a recognizable root is read as written for the side we
    # are converting away from.
    windows = None

    if classified.convention is PathConvention.PLAIN_LINUX:
        windows = not target.is_windows

    parsed = parse(
        classified.remainder,
        classified.convention,
        letter=classified.letter,
        mount_root=options.mount_root,
        windows=windows,
        source=path
    )

    result = serialize(convert(parsed, target, options, source=path), target)

    log.debug('%r -> %r', path, result)

    return result
