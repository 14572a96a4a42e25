from pon.types.symbol import Symbol, TRUE, FALSE, to_boolean
from pon.types.nil import Nil, NilType
from pon.types.environment import Environment
from pon.types.procedure import Procedure

__all__ = [
    "Symbol",
    "TRUE",
    "FALSE",
    "to_boolean",
    "Nil",
    "NilType",
    "Environment",
    "Procedure",
]
