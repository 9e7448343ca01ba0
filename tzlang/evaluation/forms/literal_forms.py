from __future__ import annotations

import math
from typing import Optional

from tzlang import EvaluatorFn
from tzlang.reader.token import Specialization
from tzlang.types.environment import Environment
from tzlang.types.nodes import NumericLiteral
from tzlang.types.values import FloatValue, RuntimeValue

RADIX_PREFIXES = {"0x": 16, "0b": 2}


def number_from_text(text: str, specialization: Optional[Specialization] = None) -> float:
    """Interpret literal text as a float, honoring hex/binary integer bases.

    Without a specialization (e.g. a hand-built node) the base is inferred
    from the `0x`/`0b` prefix.
    """
    if specialization is not None:
        base = specialization.base
    else:
        base = RADIX_PREFIXES.get(text[:2], 10)

    if base == 10:
        return float(text)
    try:
        return float(int(text[2:], base))
    except OverflowError:
        return math.inf


def numeric_literal_form(
    node: NumericLiteral,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    specialization = node.token.specialization if node.token is not None else None
    return FloatValue(number_from_text(node.text, specialization))
