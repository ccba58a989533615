# style/__init__.py

from .definitions import (
    Channel, Color, DEFAULT_STYLE, NamedColor, Rgb, Style, StyleDefinitions,
)
from .engine import StyleEngine, StyleStack

__all__ = [
    'Channel', 'Color', 'DEFAULT_STYLE', 'NamedColor', 'Rgb', 'Style',
    'StyleDefinitions', 'StyleEngine', 'StyleStack',
]
