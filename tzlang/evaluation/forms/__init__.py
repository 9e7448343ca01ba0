"""Evaluation rules for each AST construct.

Every form has the signature `(node, env, evaluate_fn) -> RuntimeValue` and
recurses through `evaluate_fn` rather than importing the evaluator, which
keeps the dispatch in tzlang.evaluation.evaluator the only place that knows
the full set of node variants.
"""

from tzlang.evaluation.forms.block_forms import block_form, evaluate_statements, scoped_form
from tzlang.evaluation.forms.control_forms import for_form, if_form
from tzlang.evaluation.forms.declaration_forms import assign_form, function_form, let_form
from tzlang.evaluation.forms.literal_forms import numeric_literal_form
from tzlang.evaluation.forms.operator_forms import binary_form, unary_form

__all__ = [
    "assign_form",
    "binary_form",
    "block_form",
    "evaluate_statements",
    "for_form",
    "function_form",
    "if_form",
    "let_form",
    "numeric_literal_form",
    "scoped_form",
    "unary_form",
]
