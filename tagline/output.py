# output.py

from io import BytesIO
from typing import Any, BinaryIO, Optional, TextIO, Union

from rich.console import Console

from .config import ColorChoice, Settings
from .errors import TaglineError
from .logger import get_logger
from .render import TemplateRenderer
from .template import FormatTemplate, add_trailing_newline, parse

TemplateLike = Union[str, FormatTemplate]

logger = get_logger(__name__)


class TextSink:
    """Adapts a text stream to the byte sink interface the renderer writes to."""

    def __init__(self, stream: TextIO, encoding: str = 'utf-8'):
        self.stream = stream
        self.encoding = encoding

    def write(self, data: bytes) -> None:
        self.stream.write(data.decode(self.encoding))


def as_template(template: TemplateLike, newline: bool = False) -> FormatTemplate:
    """Parse string templates (cached) and optionally append a trailing newline."""
    if isinstance(template, str):
        template = parse(template)
    return add_trailing_newline(template) if newline else template


def colors_enabled(console: Console, choice: ColorChoice) -> bool:
    """Decide whether escape sequences should reach the console's stream."""
    if choice is ColorChoice.ALWAYS:
        return True
    if choice is ColorChoice.NEVER:
        return False
    return console.color_system is not None and not console.no_color


def write(sink: BinaryIO, template: TemplateLike, /, *args: Any, **kwargs: Any) -> None:
    """Render `template` into a byte sink, always with escape sequences."""
    TemplateRenderer().render(as_template(template), args, kwargs, sink)


def writeln(sink: BinaryIO, template: TemplateLike, /, *args: Any, **kwargs: Any) -> None:
    """Like write(), followed by a newline."""
    TemplateRenderer().render(as_template(template, newline=True), args, kwargs, sink)


def styled(template: TemplateLike, /, *args: Any, **kwargs: Any) -> str:
    """Render `template` and return the text, escape sequences included."""
    buffer = BytesIO()
    renderer = TemplateRenderer()
    renderer.render(as_template(template), args, kwargs, buffer)
    return buffer.getvalue().decode(renderer.encoding)


def _print_to_console(console: Console, template: TemplateLike, args, kwargs,
                      newline: bool = False, settings: Optional[Settings] = None) -> None:
    settings = settings or Settings.from_env()
    renderer = TemplateRenderer(colors=colors_enabled(console, settings.color))
    try:
        sink = TextSink(console.file, renderer.encoding)
        renderer.render(as_template(template, newline), args, kwargs, sink)
    except TaglineError as e:
        logger.error(f"Styled print failed: {e}")
        raise
    finally:
        console.file.flush()


def print(template: TemplateLike, /, *args: Any, **kwargs: Any) -> None:
    """
    Render `template` to stdout.

    Colors follow TAGLINE_COLOR; under 'auto' they are written only when
    stdout is a color-capable terminal and NO_COLOR is unset.
    """
    _print_to_console(Console(), template, args, kwargs)


def println(template: TemplateLike, /, *args: Any, **kwargs: Any) -> None:
    """Like print(), followed by a newline."""
    _print_to_console(Console(), template, args, kwargs, newline=True)


def eprint(template: TemplateLike, /, *args: Any, **kwargs: Any) -> None:
    """Like print(), but to stderr."""
    _print_to_console(Console(stderr=True), template, args, kwargs)


def eprintln(template: TemplateLike, /, *args: Any, **kwargs: Any) -> None:
    """Like println(), but to stderr."""
    _print_to_console(Console(stderr=True), template, args, kwargs, newline=True)
