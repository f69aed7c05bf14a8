""" Decide which addressing convention a path string is written in.

Rules are tried in a fixed order and the first match wins:

1. ``\\\\`` prefix (UNC share, including the ``\\\\?\\`` verbatim forms)
2. ``X:`` followed by a separator or nothing (absolute drive path)
3. ``X:`` followed by anything else (drive-relative path)
4. ``<mount root>/x`` (drive mounted in the Linux environment)
5. ``//`` prefix (network share written Linux style)
6. anything else (plain path)
"""

from enum import Enum
import string
from typing import NamedTuple, Optional

from . import log
from .error import InvalidDriveLetter, MalformedInput

DEFAULT_MOUNT_ROOT = '/mnt'

WINDOWS_SEPARATORS = '\\/'
LINUX_SEPARATOR = '/'

_verbatim = '\\\\?\\'
_verbatim_unc = 'UNC\\'
_device = '\\\\.\\'


class PathConvention(Enum):
    WINDOWS_ABSOLUTE = 'windows-absolute'
    WINDOWS_UNC = 'windows-unc'
    WINDOWS_RELATIVE = 'windows-relative'
    MOUNTED_LINUX = 'mounted-linux'
    LINUX_SHARE = 'linux-share'
    PLAIN_LINUX = 'plain-linux'

    @property
    def is_windows(self) -> bool:
        return self in (
            PathConvention.WINDOWS_ABSOLUTE,
            PathConvention.WINDOWS_UNC,
            PathConvention.WINDOWS_RELATIVE
        )

    @property
    def separator(self) -> str:
        """ Separator written when serializing for this convention. """

        return '\\' if self.is_windows else '/'


class Classified(NamedTuple):
    convention: PathConvention
    remainder: str
    letter: Optional[str] = None


def is_drive_letter(value: str) -> bool:
    return len(value) == 1 and value in string.ascii_letters


def mount_prefix(mount_root: str) -> str:
    """ Mount root without trailing separators; "/" becomes "". """

    return mount_root.rstrip(LINUX_SEPARATOR)


def classify(path: str, mount_root: str = DEFAULT_MOUNT_ROOT) -> Classified:
    if '\0' in path or path.startswith(':'):
        raise MalformedInput(path)

    if path.startswith('\\\\'):
        result = _classify_unc(path)
    else:
        result = (_classify_drive(path)
                  or _classify_mounted(path, mount_root)
                  or _classify_linux(path))

    log.debug('classify %r as %s', path, result.convention.value)

    return result


def _classify_unc(path: str) -> Classified:
    if path.startswith(_verbatim):
        rest = path[len(_verbatim):]

        if len(rest) >= 2 and rest[1] == ':' and is_drive_letter(rest[0]):
            return Classified(PathConvention.WINDOWS_ABSOLUTE, rest[2:],
                              rest[0])

        if rest[:len(_verbatim_unc)].upper() == _verbatim_unc:
            return Classified(PathConvention.WINDOWS_UNC,
                              rest[len(_verbatim_unc):])

        raise MalformedInput(path, 'unsupported verbatim prefix')

    if path.startswith(_device):
        raise MalformedInput(path, 'device namespace')

    return Classified(PathConvention.WINDOWS_UNC, path[2:])


def _classify_drive(path: str) -> Optional[Classified]:
    if len(path) < 2 or path[1] != ':':
        return None

    head = path[0]
    tail = path[2:]
    rooted = tail != '' and tail[0] in WINDOWS_SEPARATORS

    if is_drive_letter(head):
        if rooted or tail == '':
            return Classified(PathConvention.WINDOWS_ABSOLUTE, tail, head)

        return Classified(PathConvention.WINDOWS_RELATIVE, tail, head)

    # "1:\foo" can only be a broken drive root.
    if rooted and head not in WINDOWS_SEPARATORS:
        raise InvalidDriveLetter(path)

    return None


def _classify_mounted(path: str, mount_root: str) -> Optional[Classified]:
    prefix = mount_prefix(mount_root) + LINUX_SEPARATOR

    if not path.startswith(prefix):
        return None

    rest = path[len(prefix):]
    segment = rest.split(LINUX_SEPARATOR, 1)[0]

    # Longer names such as /mnt/wsl are ordinary directories.
    if len(segment) != 1:
        return None

    if not is_drive_letter(segment):
        raise InvalidDriveLetter(path)

    return Classified(PathConvention.MOUNTED_LINUX, rest[1:], segment)


def _classify_linux(path: str) -> Classified:
    if path.startswith('//'):
        return Classified(PathConvention.LINUX_SHARE, path[2:])

    return Classified(PathConvention.PLAIN_LINUX, path)
