# template/definitions.py

from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ..style.definitions import Style


class ArgRefKind(Enum):
    """How a slot names its argument."""
    NEXT = "next"            # {}
    POSITION = "position"    # {2}
    NAME = "name"            # {peter}


@dataclass(frozen=True)
class ArgRef:
    """A reference from a slot to one argument, with its format spec."""
    kind: ArgRefKind
    index: Optional[int] = None
    name: Optional[str] = None
    format_spec: str = ""
    inline_style: Optional[Style] = None

    @classmethod
    def next(cls, format_spec: str = "", inline_style: Optional[Style] = None) -> "ArgRef":
        return cls(ArgRefKind.NEXT, format_spec=format_spec, inline_style=inline_style)

    @classmethod
    def position(cls, index: int, format_spec: str = "",
                 inline_style: Optional[Style] = None) -> "ArgRef":
        return cls(ArgRefKind.POSITION, index=index, format_spec=format_spec,
                   inline_style=inline_style)

    @classmethod
    def named(cls, name: str, format_spec: str = "",
              inline_style: Optional[Style] = None) -> "ArgRef":
        return cls(ArgRefKind.NAME, name=name, format_spec=format_spec,
                   inline_style=inline_style)

    def describe(self) -> str:
        """Human readable form used in error messages."""
        if self.kind is ArgRefKind.POSITION:
            return f"position {self.index}"
        if self.kind is ArgRefKind.NAME:
            return f"name {self.name!r}"
        return "next implicit argument"


@dataclass(frozen=True)
class TextFragment:
    """
    Literal text interleaved with argument slots.

    `parts` always has exactly one element more than `slots`.
    """
    parts: Tuple[str, ...] = ("",)
    slots: Tuple[ArgRef, ...] = ()

    def __post_init__(self):
        if len(self.parts) != len(self.slots) + 1:
            raise ValueError(
                f"text fragment needs {len(self.slots) + 1} parts, got {len(self.parts)}"
            )


@dataclass(frozen=True)
class StyleOpen:
    """A `{$...}` style start tag."""
    style: Style


@dataclass(frozen=True)
class StyleClose:
    """A `{/$}` style end tag."""
    pass


Fragment = Union[TextFragment, StyleOpen, StyleClose]


@dataclass(frozen=True)
class FormatTemplate:
    """A parsed template. Immutable and safe to reuse across renders."""
    fragments: Tuple[Fragment, ...] = field(default_factory=tuple)

    def __post_init__(self):
        depth = 0
        for fragment in self.fragments:
            if isinstance(fragment, StyleOpen):
                depth += 1
            elif isinstance(fragment, StyleClose):
                depth -= 1
                if depth < 0:
                    raise ValueError("style close without a matching open")
        if depth:
            raise ValueError(f"{depth} style tag(s) left open")

    @property
    def slots(self) -> Tuple[ArgRef, ...]:
        """All argument slots in source order."""
        return tuple(
            slot
            for fragment in self.fragments if isinstance(fragment, TextFragment)
            for slot in fragment.slots
        )


def add_trailing_newline(template: FormatTemplate) -> FormatTemplate:
    """Return a copy of `template` that renders an extra `\\n` at the end."""
    fragments = list(template.fragments)
    last = fragments[-1] if fragments else None
    if isinstance(last, TextFragment):
        # The last part always exists, so the newline goes there
        fragments[-1] = TextFragment(last.parts[:-1] + (last.parts[-1] + "\n",), last.slots)
    else:
        # Empty template or a closing tag is last
        fragments.append(TextFragment(("\n",)))
    return FormatTemplate(tuple(fragments))
