from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from . import log, message
from .classify import DEFAULT_MOUNT_ROOT, PathConvention, mount_prefix
from .error import RelativePath, UnsupportedDriveRelative
from .parse import (
    DrivePath,
    DriveRelativePath,
    MountedPath,
    ParsedPath,
    PlainPath,
    SharePath,
    UncPath
)
from .serialize import serialize


@dataclass(frozen=True)
class Options:
    """ Settings for one conversion call.

        mount_root: Linux directory holding one entry per drive letter.
        absolute: reject inputs without a root.
        normalize: resolve "." and ".." segments lexically. """

    mount_root: str = DEFAULT_MOUNT_ROOT
    absolute: bool = False
    normalize: bool = False

    def __post_init__(self) -> None:
        if not self.mount_root.startswith('/'):
            raise ValueError(
                str.format(message.mount_root_not_absolute, self.mount_root)
            )


def normalize(segments: Sequence[str], rooted: bool) -> Tuple[str, ...]:
    """ Drop "." and fold ".." into its parent without touching the disk.

        ".." above the root of a rooted path is discarded; leading ".." of a
        relative path are kept. """

    result: List[str] = []

    for it in segments:
        if it == '.':
            continue

        if it == '..':
            if result and result[-1] != '..':
                result.pop()
                continue

            if rooted:
                continue

        result.append(it)

    return tuple(result)


def convert(
    parsed: ParsedPath,
    target: PathConvention,
    options: Optional[Options] = None,
    source: Optional[str] = None
) -> ParsedPath:
    """ Map parsed onto the Windows or Linux side chosen by target. """

    if options is None:
        options = Options()

    if source is None:
        source = serialize(parsed, parsed.convention)

    if isinstance(parsed, DriveRelativePath):
        raise UnsupportedDriveRelative(source)

    if (isinstance(parsed, PlainPath) and options.absolute
            and not parsed.rooted):
        raise RelativePath(source)

    segments = parsed.segments

    if options.normalize:
        rooted = not isinstance(parsed, PlainPath) or parsed.rooted
        segments = normalize(segments, rooted)

    trailing = parsed.trailing and len(segments) > 0
    windows = target.is_windows

    result: ParsedPath

    if isinstance(parsed, (DrivePath, MountedPath)):
        if windows:
            result = DrivePath(segments=segments, trailing=trailing,
                               letter=parsed.letter.upper())
        else:
            result = MountedPath(segments=segments, trailing=trailing,
                                 mount_root=mount_prefix(options.mount_root),
                                 letter=parsed.letter.lower())
    elif isinstance(parsed, (UncPath, SharePath)):
        if windows:
            result = UncPath(segments=segments, trailing=trailing,
                             host=parsed.host, share=parsed.share)
        else:
            result = SharePath(segments=segments, trailing=trailing,
                               host=parsed.host, share=parsed.share)
    elif isinstance(parsed, PlainPath):
        result = PlainPath(segments=segments, trailing=trailing,
                           rooted=parsed.rooted)
    else:
        raise TypeError(f'cannot convert {type(parsed).__name__}')

    log.debug('convert %s -> %s', parsed.convention.value,
              result.convention.value)

    return result
