# render/strategies.py

import math
import operator
import pprint
from typing import Any, Callable, Dict, Protocol

from ..errors import FormatError

class ValueFormatter(Protocol):
    """Protocol for turning one argument value into text."""
    def format(self, value: Any, spec: str) -> str: ...

class DefaultValueFormatter:
    """
    Python-native value formatting keyed by format spec.

    Recognized specs:
        ''      str(value)
        '?'     repr(value)
        '#?'    pretty-printed repr
        'x' 'X' 'o' 'b'   integer in hex, upper hex, octal, binary
        'e' 'E' shortest round-trip scientific notation, e.g. 3.14e0

    Anything else goes to the built-in format().
    """
    def __init__(self):
        self._strategies: Dict[str, Callable[[Any], str]] = {
            '': str,
            '?': repr,
            '#?': pprint.pformat,
            'x': lambda v: format(operator.index(v), 'x'),
            'X': lambda v: format(operator.index(v), 'X'),
            'o': lambda v: format(operator.index(v), 'o'),
            'b': lambda v: format(operator.index(v), 'b'),
            'e': lambda v: self._scientific(v),
            'E': lambda v: self._scientific(v).replace('e', 'E'),
        }

    def format(self, value: Any, spec: str) -> str:
        strategy = self._strategies.get(spec)
        try:
            if strategy is not None:
                return strategy(value)
            return format(value, spec)
        except (TypeError, ValueError, OverflowError) as exc:
            raise FormatError(value, spec, str(exc)) from exc

    @staticmethod
    def _scientific(value: Any) -> str:
        if isinstance(value, int):
            # Exact for integers of any size
            sign = "-" if value < 0 else ""
            all_digits = str(abs(value))
            digits = all_digits.rstrip("0") or "0"
            mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
            return f"{sign}{mantissa}e{len(all_digits) - 1}"
        number = float(value)
        if not math.isfinite(number):
            return repr(number)
        # Fewest mantissa digits that still round-trip
        for precision in range(17):
            text = f'{number:.{precision}e}'
            if float(text) == number:
                break
        mantissa, exponent = text.split('e')
        return f'{mantissa}e{int(exponent)}'
