#!/usr/bin/env python

import configparser
from dataclasses import dataclass, field
from os.path import exists, expanduser
from typing import Any, Optional

import tomlkit
from tomlkit.exceptions import ParseError
from tomlkit.items import Table
from tomlkit.toml_document import TOMLDocument

from . import log, message
from .classify import DEFAULT_MOUNT_ROOT
from .convert import Options
from .error import FatalError

default_config_path = '~/.config/wslconv/config.toml'
wsl_conf_path = '/etc/wsl.conf'


def wsl_conf_mount_root(path: str = wsl_conf_path) -> Optional[str]:
    """ Read the automount root configured for the WSL distribution. """

    if not exists(path):
        return None

    parser = configparser.ConfigParser(interpolation=None)

    try:
        parser.read(path, encoding='utf-8')
    except configparser.Error as e:
        log.warning('ignore %s: %s', path, e)
        return None

    root = parser.get('automount', 'root', fallback=None)

    if root is None:
        return None

    root = root.strip().strip('"\'')

    return root or None


def user_config_path() -> Optional[str]:
    path = expanduser(default_config_path)

    return path if exists(path) else None


@dataclass
class Config:
    @dataclass
    class Convert:
        mount_root: str = DEFAULT_MOUNT_ROOT
        absolute: bool = False
        normalize: bool = False

    log_level: str = 'WARNING'

    convert: Convert = field(default_factory=Convert)

    @classmethod
    def from_file(cls, path: str) -> 'Config':
        """ Parse the configuration from an existing file. """

        try:
            with open(path, 'r', encoding='utf-8') as fi:
                doc = tomlkit.parse(fi.read())
        except FileNotFoundError:
            raise FatalError(str.format(message.config_not_found, path))
        except ParseError as e:
            raise FatalError(f'{path}: {e}')

        log.debug('config %s: %s', path, doc)

        ctx = cls()

        ctx.log_level = _get(doc, 'log_level', str, ctx.log_level, path)

        convert = _get(doc, 'convert', Table, None, path)

        if convert is not None:
            defaults = ctx.convert

            ctx.convert = cls.Convert(
                _get(convert, 'mount_root', str, defaults.mount_root, path),
                _get(convert, 'absolute', bool, defaults.absolute, path),
                _get(convert, 'normalize', bool, defaults.normalize, path)
            )

        return ctx

    def options(self) -> Options:
        convert = self.convert

        return Options(
            mount_root=convert.mount_root,
            absolute=convert.absolute,
            normalize=convert.normalize
        )

    def toml(self) -> TOMLDocument:
        doc = tomlkit.document()
        doc.add('log_level', self.log_level)
        doc.add(tomlkit.nl())

        convert = tomlkit.table()
        convert.add('mount_root', self.convert.mount_root)
        convert.add('absolute', self.convert.absolute)
        convert.add('normalize', self.convert.normalize)

        doc.add('convert', convert)

        return doc

    def write_toml(self, path: str, mode: str = 'w') -> None:
        with open(path, mode, encoding='utf-8') as fi:
            fi.write(self.toml().as_string())


def _get(table: Any, key: str, type_: type, default: Any, path: str) -> Any:
    value = table.get(key)

    if value is None:
        return default

    if not isinstance(value, type_):
        raise FatalError(str.format(message.config_bad_value, path, key))

    # Unwrap tomlkit string items.
    return str(value) if type_ is str else value
