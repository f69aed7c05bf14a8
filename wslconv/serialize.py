from .classify import PathConvention
from .parse import (
    DrivePath,
    DriveRelativePath,
    MountedPath,
    ParsedPath,
    PlainPath,
    SharePath,
    UncPath
)


def serialize(parsed: ParsedPath, target: PathConvention) -> str:
    """ Join root and segments with the separator of target.

        Segments are copied verbatim. Only plain paths can be written for
        either side; every other shape belongs to one side. """

    if (not isinstance(parsed, PlainPath)
            and parsed.convention.is_windows != target.is_windows):
        raise ValueError(
            f'cannot write {parsed.convention.value} as {target.value}'
        )

    sep = target.separator
    tail = ''.join(sep + it for it in parsed.segments)

    if isinstance(parsed, DrivePath):
        # A drive root always keeps its separator: C:\
        result = f'{parsed.letter}:{sep}{sep.join(parsed.segments)}'
    elif isinstance(parsed, DriveRelativePath):
        result = f'{parsed.letter}:{sep.join(parsed.segments)}'
    elif isinstance(parsed, MountedPath):
        result = f'{parsed.mount_root}/{parsed.letter}{tail}'
    elif isinstance(parsed, (UncPath, SharePath)):
        result = f'{sep}{sep}{parsed.host}{sep}{parsed.share}{tail}'
    elif isinstance(parsed, PlainPath):
        result = sep.join(parsed.segments)

        if parsed.rooted:
            result = sep + result
    else:
        raise TypeError(f'cannot serialize {type(parsed).__name__}')

    if parsed.trailing and parsed.segments:
        result += sep

    return result
