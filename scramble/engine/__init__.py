from .letters import is_possible, missing_letters
from .validation import (
    Accepted,
    NoOp,
    Rejected,
    RejectionReason,
    is_original,
    is_real,
    normalize,
    validate,
)

__all__ = [
    "is_possible", "missing_letters",
    "Accepted", "Rejected", "NoOp", "RejectionReason",
    "normalize", "is_original", "is_real", "validate",
]
