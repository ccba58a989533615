# style/definitions.py

import string
from enum import Enum, IntEnum
from dataclasses import dataclass, fields
from typing import Dict, Optional, Union


class NamedColor(IntEnum):
    """The eight base terminal colors, valued by their palette index."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


@dataclass(frozen=True)
class Rgb:
    """An explicit true-color value."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for component in (self.r, self.g, self.b):
            if not 0 <= component <= 255:
                raise ValueError(f"RGB component out of range: {component}")

    @classmethod
    def from_hex(cls, text: str) -> "Rgb":
        """Build a color from a 'rrggbb' hex string (no leading '#')."""
        if len(text) != 6 or any(c not in string.hexdigits for c in text):
            raise ValueError(f"expected six hex digits, got {text!r}")
        value = int(text, 16)
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


Color = Union[NamedColor, Rgb]


class Channel(Enum):
    FOREGROUND = "fg"
    BACKGROUND = "bg"


@dataclass(frozen=True)
class Style:
    """
    A set of independently optional terminal attributes.

    None means "unset" and falls through to the enclosing scope when merged;
    False is an explicit value and does not.
    """
    foreground: Optional[Color] = None
    background: Optional[Color] = None
    bold: Optional[bool] = None
    intense: Optional[bool] = None
    underline: Optional[bool] = None
    italic: Optional[bool] = None
    reset: Optional[bool] = None

    def or_else(self, parent: "Style") -> "Style":
        """Keep every attribute set here, take the rest from `parent`."""
        return Style(**{
            f.name: getattr(self, f.name) if getattr(self, f.name) is not None
            else getattr(parent, f.name)
            for f in fields(self)
        })

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


DEFAULT_STYLE = Style()


class StyleDefinitions:
    """
    Escape code tables and the color codec.

    Every transition starts with a full reset and then reapplies the whole
    effective style, one SGR sequence per attribute.
    """

    # ANSI format utility
    FMT = staticmethod(lambda x: f'\033[{x}m')

    def __init__(self, formats: Optional[Dict[str, str]] = None):
        self._default_formats = {
            'RESET': self.FMT('0'),
            'BOLD_ON': self.FMT('1'),
            'ITALIC_ON': self.FMT('3'),
            'UNDERLINE_ON': self.FMT('4'),
        }
        # Overrides never remove a default code
        self.formats = {**self._default_formats, **(formats or {})}

        # Base parameter per channel; named colors are offset by palette index
        self._standard_base = {Channel.FOREGROUND: 30, Channel.BACKGROUND: 40}
        self._extended_prefix = {Channel.FOREGROUND: '38', Channel.BACKGROUND: '48'}

    def get_format(self, name: str) -> str:
        """Get a format code by name."""
        return self.formats.get(name, '')

    def encode_color(self, color: Color, intense: bool, channel: Channel) -> str:
        """
        Return the SGR parameter string for a color on one channel.

        Args:
            color: A NamedColor or Rgb value
            intense: Select the bright half of the 256-color palette for named colors
            channel: Foreground or background

        Returns:
            Parameter string without the surrounding escape, e.g. '31' or '38;5;9'
        """
        prefix = self._extended_prefix[channel]
        if isinstance(color, Rgb):
            return f'{prefix};2;{color.r};{color.g};{color.b}'
        if intense:
            return f'{prefix};5;{8 + int(color)}'
        return str(self._standard_base[channel] + int(color))

    def render_transition(self, style: Style) -> str:
        """Return the escape text that switches the terminal to `style` from any state."""
        out = [self.get_format('RESET')]
        if style.bold:
            out.append(self.get_format('BOLD_ON'))
        if style.underline:
            out.append(self.get_format('UNDERLINE_ON'))
        if style.italic:
            out.append(self.get_format('ITALIC_ON'))
        intense = bool(style.intense)
        if style.foreground is not None:
            out.append(self.FMT(self.encode_color(style.foreground, intense, Channel.FOREGROUND)))
        if style.background is not None:
            out.append(self.FMT(self.encode_color(style.background, intense, Channel.BACKGROUND)))
        return ''.join(out)
