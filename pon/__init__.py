# Core type aliases for Pon's data model.
# Plain Python types (int, float, list) plus Symbol and Nil represent both
# code (forms) and runtime values. There is no separate AST node type.
#
# Naming guidance:
# - SExpression: Use in reader/printer code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
