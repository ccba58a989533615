# render/resolver.py

from typing import Any, Mapping, Optional, Sequence

from ..errors import MissingArgumentError, UnusedArgumentError
from ..template.definitions import ArgRef, ArgRefKind, FormatTemplate

class ArgumentResolver:
    """
    Binds slots to supplied arguments for one render.

    `{}` slots take the argument at the implicit cursor and advance it;
    `{2}` and `{name}` slots never touch the cursor.
    """
    def __init__(self, positional: Sequence[Any] = (),
                 named: Optional[Mapping[str, Any]] = None):
        self.positional = positional
        self.named = named if named is not None else {}
        self.cursor = 0

    def resolve(self, slot: ArgRef) -> Any:
        """Return the value `slot` consumes or raise MissingArgumentError."""
        if slot.kind is ArgRefKind.NEXT:
            if self.cursor >= len(self.positional):
                raise MissingArgumentError(
                    slot.describe(),
                    f"implicit argument {self.cursor} requested, "
                    f"{len(self.positional)} positional supplied",
                )
            value = self.positional[self.cursor]
            self.cursor += 1
            return value

        if slot.kind is ArgRefKind.POSITION:
            if slot.index >= len(self.positional):
                raise MissingArgumentError(
                    slot.describe(), f"{len(self.positional)} positional supplied"
                )
            return self.positional[slot.index]

        try:
            return self.named[slot.name]
        except KeyError:
            raise MissingArgumentError(slot.describe()) from None

    def check_unused(self, template: FormatTemplate) -> None:
        """
        Raise UnusedArgumentError if an argument is never referenced.

        Works on the template alone, so it can run before anything is written.
        """
        used_positions = set()
        used_names = set()
        implicit = 0
        for slot in template.slots:
            if slot.kind is ArgRefKind.NEXT:
                used_positions.add(implicit)
                implicit += 1
            elif slot.kind is ArgRefKind.POSITION:
                used_positions.add(slot.index)
            else:
                used_names.add(slot.name)

        for index in range(len(self.positional)):
            if index not in used_positions:
                raise UnusedArgumentError(f"at position {index}")
        for name in self.named:
            if name not in used_names:
                raise UnusedArgumentError(f"{name!r}")
