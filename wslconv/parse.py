from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple

from .classify import (
    DEFAULT_MOUNT_ROOT,
    LINUX_SEPARATOR,
    WINDOWS_SEPARATORS,
    PathConvention,
    is_drive_letter,
    mount_prefix
)
from .error import EmptyShareComponent, InvalidDriveLetter


@dataclass(frozen=True, kw_only=True)
class ParsedPath:
    """ Ordered segments plus the root shape of one convention.

        Each subclass carries exactly the root information its convention
        has, so a drive letter can never sit next to a UNC host. """

    convention: ClassVar[PathConvention]

    segments: Tuple[str, ...] = ()
    trailing: bool = False


@dataclass(frozen=True, kw_only=True)
class DrivePath(ParsedPath):
    convention = PathConvention.WINDOWS_ABSOLUTE

    letter: str


@dataclass(frozen=True, kw_only=True)
class DriveRelativePath(ParsedPath):
    convention = PathConvention.WINDOWS_RELATIVE

    letter: str


@dataclass(frozen=True, kw_only=True)
class MountedPath(ParsedPath):
    convention = PathConvention.MOUNTED_LINUX

    mount_root: str
    letter: str


@dataclass(frozen=True, kw_only=True)
class UncPath(ParsedPath):
    convention = PathConvention.WINDOWS_UNC

    host: str
    share: str


@dataclass(frozen=True, kw_only=True)
class SharePath(ParsedPath):
    convention = PathConvention.LINUX_SHARE

    host: str
    share: str


@dataclass(frozen=True, kw_only=True)
class PlainPath(ParsedPath):
    convention = PathConvention.PLAIN_LINUX

    rooted: bool = False


def split(text: str, separators: str) -> Tuple[List[str], bool]:
    """ Split on any of separators, dropping empty segments.

        Returns the segments and whether text ended with a separator after
        at least one segment. """

    sep = separators[0]

    for other in separators[1:]:
        text = text.replace(other, sep)

    segments = [it for it in text.split(sep) if it]
    trailing = len(segments) > 0 and text.endswith(sep)

    return (segments, trailing)


def parse(
    remainder: str,
    convention: PathConvention,
    letter: Optional[str] = None,
    mount_root: str = DEFAULT_MOUNT_ROOT,
    windows: Optional[bool] = None,
    source: Optional[str] = None
) -> ParsedPath:
    """ Build the ParsedPath for a classified remainder.

        windows selects the separators for plain input; by default it
        follows the convention. source is the full input, used in error
        messages. """

    if windows is None:
        windows = convention.is_windows

    separators = WINDOWS_SEPARATORS if windows else LINUX_SEPARATOR
    source = remainder if source is None else source

    if convention in (PathConvention.WINDOWS_UNC,
                      PathConvention.LINUX_SHARE):
        return _parse_share(remainder, convention, separators, source)

    (segments, trailing) = split(remainder, separators)

    if convention is PathConvention.PLAIN_LINUX:
        rooted = remainder != '' and remainder[0] in separators

        return PlainPath(segments=tuple(segments), trailing=trailing,
                         rooted=rooted)

    if letter is None:
        raise ValueError(f'{convention.value} path requires a drive letter')

    if not is_drive_letter(letter):
        raise InvalidDriveLetter(source)

    if convention is PathConvention.WINDOWS_ABSOLUTE:
        return DrivePath(segments=tuple(segments), trailing=trailing,
                         letter=letter)
    elif convention is PathConvention.WINDOWS_RELATIVE:
        return DriveRelativePath(segments=tuple(segments), trailing=trailing,
                                 letter=letter)
    else:
        return MountedPath(segments=tuple(segments), trailing=trailing,
                           mount_root=mount_prefix(mount_root),
                           letter=letter)


def _parse_share(
    remainder: str,
    convention: PathConvention,
    separators: str,
    source: str
) -> ParsedPath:
    sep = separators[0]

    for other in separators[1:]:
        remainder = remainder.replace(other, sep)

    parts = remainder.split(sep, 2)

    host = parts[0]
    share = parts[1] if len(parts) > 1 else ''
    rest = parts[2] if len(parts) > 2 else ''

    if host == '':
        raise EmptyShareComponent(source, 'empty host')

    if share == '':
        raise EmptyShareComponent(source, 'empty share')

    (segments, trailing) = split(rest, sep)

    if convention is PathConvention.WINDOWS_UNC:
        return UncPath(segments=tuple(segments), trailing=trailing,
                       host=host, share=share)

    return SharePath(segments=tuple(segments), trailing=trailing,
                     host=host, share=share)
