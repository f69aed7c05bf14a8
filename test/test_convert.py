import pytest

from wslconv.classify import PathConvention
from wslconv.convert import Options, convert, normalize
from wslconv.error import RelativePath, UnsupportedDriveRelative
from wslconv.parse import (
    DrivePath,
    DriveRelativePath,
    MountedPath,
    PlainPath,
    SharePath,
    UncPath
)

LINUX = PathConvention.MOUNTED_LINUX
WINDOWS = PathConvention.WINDOWS_ABSOLUTE


class TestOptions:
    def test_defaults(self):
        options = Options()

        assert options.mount_root == '/mnt'
        assert not options.absolute
        assert not options.normalize

    def test_relative_mount_root(self):
        with pytest.raises(ValueError):
            Options(mount_root='mnt')


class TestNormalize:
    def test_dots(self):
        assert normalize(['foo', '..', 'bar', '.', 'baz.txt'], True) == \
            ('bar', 'baz.txt')

    def test_above_root(self):
        assert normalize(['..', '..', 'a'], True) == ('a',)

    def test_relative_keeps_leading_parents(self):
        assert normalize(['..', 'a', '..', '..', 'b'], False) == \
            ('..', '..', 'b')


class TestConvert:
    def setup_method(self) -> None:
        self.options = Options()

    def test_drive_to_mounted(self):
        parsed = DrivePath(segments=('Users', 'Foo'), letter='C')

        assert convert(parsed, LINUX) == MountedPath(
            segments=('Users', 'Foo'), mount_root='/mnt', letter='c')

    def test_mounted_to_drive(self):
        parsed = MountedPath(segments=('x',), trailing=True,
                             mount_root='/mnt', letter='d')

        assert convert(parsed, WINDOWS) == DrivePath(
            segments=('x',), trailing=True, letter='D')

    def test_custom_mount_root(self):
        parsed = DrivePath(segments=('x',), letter='E')
        options = Options(mount_root='/custom/')

        result = convert(parsed, LINUX, options)

        assert isinstance(result, MountedPath)
        assert result.mount_root == '/custom'

    def test_same_side_canonicalizes_letter(self):
        assert convert(DrivePath(letter='c'), WINDOWS) == \
            DrivePath(letter='C')
        assert convert(MountedPath(mount_root='/mnt', letter='C'), LINUX) == \
            MountedPath(mount_root='/mnt', letter='c')

    def test_unc_to_share(self):
        parsed = UncPath(segments=('Dir',), host='SERVER', share='Share$')

        assert convert(parsed, LINUX) == SharePath(
            segments=('Dir',), host='SERVER', share='Share$')

    def test_share_to_unc(self):
        parsed = SharePath(host='server', share='share')

        assert convert(parsed, WINDOWS) == UncPath(host='server',
                                                   share='share')

    def test_plain_passthrough(self):
        parsed = PlainPath(segments=('usr', 'bin'), rooted=True)

        assert convert(parsed, WINDOWS) == parsed
        assert convert(parsed, LINUX) == parsed

    def test_drive_relative(self):
        parsed = DriveRelativePath(segments=('foo',), letter='C')

        with pytest.raises(UnsupportedDriveRelative) as e:
            convert(parsed, LINUX)

        assert e.value.path == 'C:foo'

    def test_absolute_rejects_relative(self):
        options = Options(absolute=True)

        with pytest.raises(RelativePath):
            convert(PlainPath(segments=('foo',)), LINUX, options,
                    source='foo')

        rooted = PlainPath(segments=('foo',), rooted=True)

        assert convert(rooted, LINUX, options) == rooted

    def test_normalize(self):
        options = Options(normalize=True)
        parsed = DrivePath(segments=('foo', '..', 'bar', '.', 'baz.txt'),
                           letter='C')

        assert convert(parsed, LINUX, options).segments == ('bar', 'baz.txt')

    def test_normalize_to_root_drops_trailing(self):
        options = Options(normalize=True)
        parsed = DrivePath(segments=('foo', '..'), trailing=True, letter='C')

        result = convert(parsed, WINDOWS, options)

        assert result.segments == ()
        assert not result.trailing

    def test_no_normalize_by_default(self):
        parsed = DrivePath(segments=('a', '..', 'b'), letter='C')

        assert convert(parsed, LINUX).segments == ('a', '..', 'b')
