# __init__.py

from typing import Any, BinaryIO, Mapping, Optional, Sequence

from .errors import (
    FormatError, MissingArgumentError, ParseError, ParseErrorKind, RenderError,
    TaglineError, UnusedArgumentError,
)
from .logger import Logger
from .config import ColorChoice, Settings
from .style import NamedColor, Rgb, Style
from .template import FormatTemplate, add_trailing_newline, parse
from .render import DefaultValueFormatter, TemplateRenderer, ValueFormatter
from .output import eprint, eprintln, print, println, styled, write, writeln


def render(template: FormatTemplate, positional: Sequence[Any] = (),
           named: Optional[Mapping[str, Any]] = None, sink: Optional[BinaryIO] = None,
           formatter: Optional[ValueFormatter] = None, colors: bool = True,
           strict: bool = False) -> None:
    """Render a parsed template into a byte sink."""
    TemplateRenderer(formatter=formatter, colors=colors).render(
        template, positional, named, sink, strict=strict
    )


__all__ = [
    "ColorChoice", "DefaultValueFormatter", "FormatError", "FormatTemplate",
    "Logger", "MissingArgumentError", "NamedColor", "ParseError",
    "ParseErrorKind", "RenderError", "Rgb", "Settings", "Style",
    "TaglineError", "TemplateRenderer", "UnusedArgumentError",
    "ValueFormatter", "add_trailing_newline", "eprint", "eprintln", "parse",
    "print", "println", "render", "styled", "write", "writeln",
]
