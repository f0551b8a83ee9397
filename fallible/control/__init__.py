from .guard import ensure, reject
from .recover import recover, recover_with
from .sequence import DEFAULT_POLICY, SequencePolicy, any_error, run_sequence, short_circuit

__all__ = (
    # Policies
    "DEFAULT_POLICY",
    "SequencePolicy",
    # Short-circuit evaluator
    "any_error",
    "run_sequence",
    "short_circuit",
    # Guards
    "ensure",
    "reject",
    # Recovery
    "recover",
    "recover_with",
)
