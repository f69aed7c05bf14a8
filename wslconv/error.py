from typing import Optional

from . import message


class FatalError(Exception):
    """ Unrecoverable front-end failure, reported by main(). """


class ConversionError(Exception):
    """ Base class of every failure raised while converting a path. """

    kind = 'ConversionError'
    template = '"{}"'

    def __init__(self, path: str, detail: Optional[str] = None) -> None:
        self.path = path
        self.detail = detail

        text = str.format(self.template, path)

        if detail is not None:
            text = f'{text} ({detail})'

        super().__init__(text)


class InvalidDriveLetter(ConversionError):
    kind = 'InvalidDriveLetter'
    template = message.invalid_drive_letter


class EmptyShareComponent(ConversionError):
    kind = 'EmptyShareComponent'
    template = message.empty_share_component


class UnsupportedDriveRelative(ConversionError):
    kind = 'UnsupportedDriveRelative'
    template = message.unsupported_drive_relative


class MalformedInput(ConversionError):
    kind = 'MalformedInput'
    template = message.malformed_input


class RelativePath(ConversionError):
    kind = 'RelativePath'
    template = message.relative_path
