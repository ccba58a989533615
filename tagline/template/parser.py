# template/parser.py

from typing import Dict, List, Optional

from ..errors import ParseError, ParseErrorKind
from ..logger import Logger, get_logger
from ..style.definitions import NamedColor, Rgb, Style
from .definitions import ArgRef, FormatTemplate, StyleClose, StyleOpen, TextFragment

COLOR_NAMES: Dict[str, NamedColor] = {color.name.lower(): color for color in NamedColor}
FLAG_TOKENS = ('bold', 'intense', 'underline', 'italic', 'reset')


class TemplateParser:
    """
    Single left-to-right scanner for the template grammar.

    Literal text and argument slots accumulate into the current text
    fragment; style tags flush it and append their own fragment. `{{` and
    `}}` are escapes for literal braces.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger or get_logger(__name__)

    def parse(self, source: str) -> FormatTemplate:
        fragments: List = []
        parts: List[str] = []
        slots: List[ArgRef] = []
        literal: List[str] = []
        open_tags: List[int] = []

        def flush_text() -> None:
            final_parts = parts + [''.join(literal)]
            if slots or final_parts[0]:
                fragments.append(TextFragment(tuple(final_parts), tuple(slots)))
            parts.clear()
            slots.clear()
            literal.clear()

        i, length = 0, len(source)
        while i < length:
            char = source[i]
            if char == '}':
                if source.startswith('}}', i):
                    literal.append('}')
                    i += 2
                    continue
                raise ParseError(ParseErrorKind.UNMATCHED_BRACE,
                                 "use '}}' for a literal brace", i)
            if char != '{':
                literal.append(char)
                i += 1
                continue
            if source.startswith('{{', i):
                literal.append('{')
                i += 2
                continue

            end = source.find('}', i)
            if end == -1:
                raise ParseError(ParseErrorKind.UNTERMINATED_BRACE,
                                 "'{' is never closed; use '{{' for a literal brace", i)
            body = source[i + 1:end]

            if body.startswith('$'):
                flush_text()
                fragments.append(StyleOpen(self._parse_style(body[1:], i)))
                open_tags.append(i)
            elif body == '/$':
                if not open_tags:
                    raise ParseError(ParseErrorKind.UNMATCHED_CLOSE_TAG,
                                     "'{/$}' without an open style tag", i)
                flush_text()
                fragments.append(StyleClose())
                open_tags.pop()
            elif body.startswith('['):
                close = body.find(']')
                if close == -1:
                    raise ParseError(ParseErrorKind.MALFORMED_SLOT,
                                     "inline style is missing ']'", i)
                inline_style = self._parse_style(body[1:close], i)
                parts.append(''.join(literal))
                literal.clear()
                slots.append(self._parse_slot(body[close + 1:], i, inline_style))
            else:
                parts.append(''.join(literal))
                literal.clear()
                slots.append(self._parse_slot(body, i))
            i = end + 1

        if open_tags:
            raise ParseError(ParseErrorKind.UNTERMINATED_STYLE_TAG,
                             f"{len(open_tags)} style tag(s) never closed with '{{/$}}'",
                             open_tags[-1])
        flush_text()

        template = FormatTemplate(tuple(fragments))
        self.logger.debug(f"Parsed template into {len(template.fragments)} fragments")
        return template

    def _parse_slot(self, body: str, position: int,
                    inline_style: Optional[Style] = None) -> ArgRef:
        """Parse `ref[:spec]` where ref is empty, a position or an identifier."""
        ref, _, format_spec = body.partition(':')
        if not ref:
            return ArgRef.next(format_spec, inline_style)
        if ref.isascii() and ref.isdigit():
            return ArgRef.position(int(ref), format_spec, inline_style)
        if ref.isidentifier():
            return ArgRef.named(ref, format_spec, inline_style)
        raise ParseError(ParseErrorKind.MALFORMED_SLOT,
                         f"invalid argument reference {ref!r}", position)

    def _parse_style(self, body: str, position: int) -> Style:
        """Parse a '+'-separated style list into a Style."""
        if not body:
            raise ParseError(ParseErrorKind.EMPTY_STYLE, "style list is empty", position)

        attrs: Dict[str, object] = {}
        for token in body.split('+'):
            if token.startswith('bg:'):
                key, value = 'background', self._parse_color(token[3:], token, position)
            elif token in FLAG_TOKENS:
                key, value = token, True
            else:
                key, value = 'foreground', self._parse_color(token, token, position)

            if key in attrs:
                raise ParseError(ParseErrorKind.DUPLICATE_ATTRIBUTE,
                                 f"'{token}' sets {key} a second time", position)
            attrs[key] = value
        return Style(**attrs)

    def _parse_color(self, text: str, token: str, position: int):
        if text in COLOR_NAMES:
            return COLOR_NAMES[text]
        if text.startswith("#"):
            try:
                return Rgb.from_hex(text[1:])
            except ValueError as exc:
                raise ParseError(ParseErrorKind.UNKNOWN_STYLE_TOKEN,
                                 f"invalid hex color {token!r}", position) from exc
        raise ParseError(ParseErrorKind.UNKNOWN_STYLE_TOKEN,
                         f"unknown style token {token!r}", position)
