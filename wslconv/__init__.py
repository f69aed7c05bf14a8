from .classify import DEFAULT_MOUNT_ROOT, Classified, PathConvention, classify
from .convert import Options, convert, normalize
from .error import (
    ConversionError,
    EmptyShareComponent,
    InvalidDriveLetter,
    MalformedInput,
    RelativePath,
    UnsupportedDriveRelative
)
from .parse import (
    DrivePath,
    DriveRelativePath,
    MountedPath,
    ParsedPath,
    PlainPath,
    SharePath,
    UncPath,
    parse
)
from .serialize import serialize
from .util import to_linux, to_windows

__all__ = [
    'DEFAULT_MOUNT_ROOT',
    'Classified',
    'ConversionError',
    'DrivePath',
    'DriveRelativePath',
    'EmptyShareComponent',
    'InvalidDriveLetter',
    'MalformedInput',
    'MountedPath',
    'Options',
    'ParsedPath',
    'PathConvention',
    'PlainPath',
    'RelativePath',
    'SharePath',
    'UncPath',
    'UnsupportedDriveRelative',
    'classify',
    'convert',
    'normalize',
    'parse',
    'serialize',
    'to_linux',
    'to_windows'
]
