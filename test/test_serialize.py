import pytest

from wslconv.classify import PathConvention
from wslconv.parse import (
    DrivePath,
    DriveRelativePath,
    MountedPath,
    PlainPath,
    SharePath,
    UncPath
)
from wslconv.serialize import serialize

LINUX = PathConvention.MOUNTED_LINUX
WINDOWS = PathConvention.WINDOWS_ABSOLUTE


class TestSerialize:
    def test_drive(self):
        parsed = DrivePath(segments=('Users', 'Foo'), letter='C')

        assert serialize(parsed, WINDOWS) == 'C:\\Users\\Foo'

    def test_drive_root(self):
        assert serialize(DrivePath(letter='D'), WINDOWS) == 'D:\\'

    def test_drive_trailing(self):
        parsed = DrivePath(segments=('Users',), trailing=True, letter='C')

        assert serialize(parsed, WINDOWS) == 'C:\\Users\\'

    def test_drive_relative(self):
        parsed = DriveRelativePath(segments=('a', 'b'), letter='C')

        assert serialize(parsed, PathConvention.WINDOWS_RELATIVE) == 'C:a\\b'

    def test_mounted(self):
        parsed = MountedPath(segments=('Program Files (x86)', 'Foo'),
                             mount_root='/mnt', letter='c')

        assert serialize(parsed, LINUX) == '/mnt/c/Program Files (x86)/Foo'

    def test_mounted_root(self):
        parsed = MountedPath(mount_root='/mnt', letter='d')

        assert serialize(parsed, LINUX) == '/mnt/d'

    def test_mounted_at_slash(self):
        parsed = MountedPath(segments=('x',), mount_root='', letter='c')

        assert serialize(parsed, LINUX) == '/c/x'

    def test_unc(self):
        parsed = UncPath(segments=('dir',), trailing=True, host='Server',
                         share='Share')

        assert serialize(parsed, WINDOWS) == '\\\\Server\\Share\\dir\\'

    def test_share(self):
        parsed = SharePath(host='server', share='share')

        assert serialize(parsed, LINUX) == '//server/share'

    def test_plain(self):
        parsed = PlainPath(segments=('usr', 'bin'), rooted=True)

        assert serialize(parsed, LINUX) == '/usr/bin'
        assert serialize(parsed, WINDOWS) == '\\usr\\bin'

    def test_plain_root_and_empty(self):
        assert serialize(PlainPath(rooted=True), WINDOWS) == '\\'
        assert serialize(PlainPath(), LINUX) == ''

    def test_segments_verbatim(self):
        parsed = MountedPath(segments=('a b', 'c\\d', '\u00fc'),
                             mount_root='/mnt', letter='c')

        assert serialize(parsed, LINUX) == '/mnt/c/a b/c\\d/\u00fc'

    def test_wrong_side(self):
        with pytest.raises(ValueError):
            serialize(DrivePath(letter='C'), LINUX)

        with pytest.raises(ValueError):
            serialize(SharePath(host='h', share='s'), WINDOWS)
