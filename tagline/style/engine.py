# style/engine.py

from typing import List, Optional, Tuple
from .definitions import DEFAULT_STYLE, Style, StyleDefinitions

class StyleStack:
    """
    Stack of effective styles, innermost scope on top.

    Owned by a single render call; never shared.
    """
    def __init__(self):
        self._stack: List[Style] = []

    @property
    def current(self) -> Style:
        """Effective style of the innermost scope, or the empty default."""
        return self._stack[-1] if self._stack else DEFAULT_STYLE

    @property
    def depth(self) -> int:
        return len(self._stack)

    def push(self, tag: Style) -> Tuple[Style, Style]:
        """
        Open a scope for `tag` and return (effective, previous).

        A tag with reset set discards everything inherited and applies only
        its own attributes.
        """
        previous = self.current
        effective = tag if tag.reset else tag.or_else(previous)
        self._stack.append(effective)
        return effective, previous

    def pop(self) -> Style:
        """Close the innermost scope and return the style to restore."""
        if not self._stack:
            raise IndexError("pop from empty style stack")
        self._stack.pop()
        return self.current


class StyleEngine:
    """
    Turns scope transitions into escape text.

    With colors disabled the stack is still tracked but every transition
    renders as an empty string.
    """
    def __init__(self, definitions: Optional[StyleDefinitions] = None, colors: bool = True):
        self.definitions = definitions or StyleDefinitions()
        self.colors = colors
        self.stack = StyleStack()

    def open(self, tag: Style) -> str:
        effective, _ = self.stack.push(tag)
        return self._transition(effective)

    def close(self) -> str:
        return self._transition(self.stack.pop())

    def _transition(self, style: Style) -> str:
        if not self.colors:
            return ''
        return self.definitions.render_transition(style)
