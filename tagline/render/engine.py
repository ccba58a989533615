# render/engine.py

from typing import Any, BinaryIO, Mapping, Optional, Sequence

from ..errors import FormatError, MissingArgumentError
from ..logger import Logger, get_logger
from ..style.definitions import StyleDefinitions
from ..style.engine import StyleEngine
from ..template.definitions import FormatTemplate, StyleClose, StyleOpen, TextFragment
from .resolver import ArgumentResolver
from .strategies import DefaultValueFormatter, ValueFormatter

class TemplateRenderer:
    """
    Walks a FormatTemplate once and writes the result to a byte sink.

    Each render call gets its own style stack and argument cursor, so one
    renderer (and one template) can be used from several threads at once.
    Bytes written before an error stay written.
    """
    def __init__(self, formatter: Optional[ValueFormatter] = None,
                 definitions: Optional[StyleDefinitions] = None,
                 colors: bool = True,
                 encoding: str = 'utf-8',
                 logger: Optional[Logger] = None):
        """
        Args:
            formatter: Object with format(value, spec) -> str; defaults to DefaultValueFormatter
            definitions: Escape code tables shared by every render
            colors: When False, style transitions produce no output
            encoding: Text encoding used for the sink
            logger: Logger for diagnostics
        """
        self.formatter = formatter or DefaultValueFormatter()
        self.definitions = definitions or StyleDefinitions()
        self.colors = colors
        self.encoding = encoding
        self.logger = logger or get_logger(__name__)

    def render(self, template: FormatTemplate, positional: Sequence[Any] = (),
               named: Optional[Mapping[str, Any]] = None, sink: Optional[BinaryIO] = None,
               strict: bool = False) -> None:
        """
        Render `template` with the given arguments into `sink`.

        Args:
            template: Parsed template
            positional: Values for `{}` and `{N}` slots
            named: Values for `{name}` slots
            sink: Object with write(bytes)
            strict: Refuse to render if any argument is never referenced
        """
        if sink is None:
            raise TypeError("render() needs a sink with a write(bytes) method")
        resolver = ArgumentResolver(positional, named)
        if strict:
            resolver.check_unused(template)
        styles = StyleEngine(self.definitions, colors=self.colors)

        for fragment in template.fragments:
            if isinstance(fragment, TextFragment):
                self._render_text(fragment, resolver, styles, sink)
            elif isinstance(fragment, StyleOpen):
                self._emit(sink, styles.open(fragment.style))
            elif isinstance(fragment, StyleClose):
                self._emit(sink, styles.close())
            else:
                raise TypeError(f"unknown template fragment: {fragment!r}")

    def _render_text(self, fragment: TextFragment, resolver: ArgumentResolver,
                     styles: StyleEngine, sink: BinaryIO) -> None:
        self._emit(sink, fragment.parts[0])
        for slot, part in zip(fragment.slots, fragment.parts[1:]):
            try:
                value = resolver.resolve(slot)
            except MissingArgumentError as e:
                self.logger.debug(f"Render aborted: {e}")
                raise
            text = self.formatter.format(value, slot.format_spec)
            try:
                data = text.encode(self.encoding)
            except UnicodeEncodeError as exc:
                raise FormatError(value, slot.format_spec, str(exc)) from exc
            if slot.inline_style is not None:
                self._emit(sink, styles.open(slot.inline_style))
                self._write(sink, data)
                self._emit(sink, styles.close())
            else:
                self._write(sink, data)
            self._emit(sink, part)

    def _emit(self, sink: BinaryIO, text: str) -> None:
        self._write(sink, text.encode(self.encoding))

    def _write(self, sink: BinaryIO, data: bytes) -> None:
        if data:
            sink.write(data)
