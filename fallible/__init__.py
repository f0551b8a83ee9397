"""
Value-based error propagation.

Fallible computations return a Result instead of raising; callers observe
errors explicitly. A generator of checkpoints can be collapsed into a single
Result with run_sequence, which stops at the first error.

Architecture:
- Result container + ok() / error() constructors
- Unwrap protocol (lift.down): unwrap() -> (value, error), ErrorSlot
- Short-circuit evaluator (control): run_sequence / any_error / @short_circuit
- Combinators over Result: guards, recovery, traverse, fold
"""

# Core types
from ._types import ErrorValue, Predicate, Producer, StepItem, Steps
from .result import NO_ERROR, NO_VALUE, Result, error, ok

# Internal helpers (for custom steps)
from . import _helpers

# Lift helpers (reduce boilerplate)
from . import lift
from .lift import (
    ErrorSlot,
    call,
    catching,
    fail,
    from_kungfu,
    lifted,
    optional,
    or_else,
    pure,
    to_kungfu,
    unsafe,
    unwrap,
    unwrap_into,
)

# Control flow
from .control import (
    DEFAULT_POLICY,
    SequencePolicy,
    any_error,
    ensure,
    recover,
    recover_with,
    reject,
    run_sequence,
    short_circuit,
)

# Collection operations
from .collection import fold, sequence, traverse

# Errors
from ._errors import Failure, MessageError, UnwrapError, describe_error

__all__ = (
    # Types
    "ErrorValue",
    "Predicate",
    "Producer",
    "StepItem",
    "Steps",
    # Result
    "NO_ERROR",
    "NO_VALUE",
    "Result",
    "error",
    "ok",
    # Internal helpers (for custom steps)
    "_helpers",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "ErrorSlot",
    "call",
    "catching",
    "fail",
    "from_kungfu",
    "lifted",
    "optional",
    "or_else",
    "pure",
    "to_kungfu",
    "unsafe",
    "unwrap",
    "unwrap_into",
    # Control
    "DEFAULT_POLICY",
    "SequencePolicy",
    "any_error",
    "run_sequence",
    "short_circuit",
    "ensure",
    "reject",
    "recover",
    "recover_with",
    # Collection
    "fold",
    "sequence",
    "traverse",
    # Errors
    "Failure",
    "MessageError",
    "UnwrapError",
    "describe_error",
)
