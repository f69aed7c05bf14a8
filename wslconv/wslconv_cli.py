#!/usr/bin/env python
# PYTHON_ARGCOMPLETE_OK

import argparse
from dataclasses import dataclass, field
import os
import sys
from typing import Any, Callable, Optional, Sequence

import argcomplete

from . import log
from .configure import Config, user_config_path, wsl_conf_mount_root
from .convert import Options
from .error import ConversionError, FatalError
from .log import eprint
from .util import to_linux, to_windows


@dataclass
class CLI:
    config: Config = field(default_factory=Config)
    options: Options = field(default_factory=Options)

    def init(self, **kwargs: Any) -> None:
        self._init_log(kwargs['log_level'])

        log.debug('parsed args %s', kwargs)

        config_path = kwargs.get('config') or os.environ.get('WSLCONV_CONFIG')

        if config_path is None:
            config_path = user_config_path()

        if config_path is not None:
            log.info('load configuration %s', config_path)
            self.config = Config.from_file(config_path)

            if kwargs['log_level'] == 0:
                log.init(self.config.log_level)

        # Later sources override earlier ones.

        mount_root = wsl_conf_mount_root()

        if mount_root is not None:
            log.info('mount root from wsl.conf: %s', mount_root)
            self.config.convert.mount_root = mount_root

        mount_root = os.environ.get('WSLCONV_MOUNT_ROOT')

        if mount_root:
            self.config.convert.mount_root = mount_root

        if kwargs.get('mount_root'):
            self.config.convert.mount_root = kwargs['mount_root']

        if kwargs.get('absolute'):
            self.config.convert.absolute = True

        if kwargs.get('normalize'):
            self.config.convert.normalize = True

        self.options = self.config.options()

        log.debug('options %s', self.options)

    def linux(self, args: argparse.Namespace) -> int:
        return self._convert(to_linux, args.paths)

    def windows(self, args: argparse.Namespace) -> int:
        return self._convert(to_windows, args.paths)

    def write_config(self, args: argparse.Namespace) -> int:
        """ Write the effective configuration as TOML. """

        if args.output is None:
            sys.stdout.write(self.config.toml().as_string())
        else:
            log.info('write configuration %s', args.output)
            self.config.write_toml(args.output)

        return 0

    def _convert(
        self,
        func: Callable[[str, Optional[Options]], str],
        paths: Sequence[str]
    ) -> int:
        status = 0

        for it in paths:
            try:
                print(func(it, self.options))
            except ConversionError as e:
                eprint(f'{e.kind}: {it}')
                log.info('%s', e)
                status = 1

        return status

    def _init_log(self, log_level: int) -> None:
        if log_level <= 0:
            log_level_str = 'WARNING'
        elif log_level == 1:
            log_level_str = 'INFO'
        else:
            log_level_str = 'DEBUG'

        log.init(log_level_str)

        if log_level >= 1:
            log.set_detail(1)


class Parser:
    def __init__(
        self,
        cli: CLI,
        argv: Optional[Sequence[str]] = None
    ) -> None:
        self.parser = argparse.ArgumentParser(
            prog='wslconv',
            description='Convert paths between Windows and the Linux '
                        'environment running on it.')

        self.subparsers = self.parser.add_subparsers(required=True)

        self._init_linux(cli)
        self._init_windows(cli)
        self._init_config(cli)

        self.parser.add_argument('-l', '--log-level', type=int, default=0)
        self.parser.add_argument('--config')
        self.parser.add_argument('--mount-root')
        self.parser.add_argument('-a', '--absolute', action='store_true')
        self.parser.add_argument('--normalize', action='store_true')

        argcomplete.autocomplete(self.parser)

        parsed = self.parser.parse_args(
            sys.argv[1:] if argv is None else argv
        )

        func = parsed.func
        args = parsed

        del args.func

        cli.init(**vars(args))

        self.status = func(args)

    def _init_linux(self, cli: CLI) -> None:
        subparser = self.subparsers.add_parser(
            'linux', help='convert Windows paths to Linux paths')
        subparser.add_argument('paths', nargs='+')
        subparser.set_defaults(func=cli.linux)

    def _init_windows(self, cli: CLI) -> None:
        subparser = self.subparsers.add_parser(
            'windows', help='convert Linux paths to Windows paths')
        subparser.add_argument('paths', nargs='+')
        subparser.set_defaults(func=cli.windows)

    def _init_config(self, cli: CLI) -> None:
        subparser = self.subparsers.add_parser(
            'config', help='write the effective configuration')
        subparser.add_argument('-o', '--output')
        subparser.set_defaults(func=cli.write_config)


def main(argv: Optional[Sequence[str]] = None) -> None:
    try:
        cli = CLI()

        status = Parser(cli, argv).status
    except ValueError as e:
        eprint(e)
        sys.exit(1)
    except FatalError as e:
        eprint(e)
        sys.exit(1)

    sys.exit(status)


if __name__ == '__main__':
    main()
