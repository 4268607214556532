from __future__ import annotations
from typing import Dict, Type

# ---- Global oracle registry ----
REGISTRY: Dict[str, Type["BaseOracle"]] = {}


def register(cls: Type["BaseOracle"]) -> Type["BaseOracle"]:
    """
    Decorator: @register on an oracle class adds it to REGISTRY by its `id`.
    """
    oid = getattr(cls, "id", None)
    if not oid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if oid in REGISTRY:
        raise ValueError(f"Duplicate oracle id: {oid}")
    REGISTRY[oid] = cls
    return cls


# ---- Base class that oracles inherit ----
class BaseOracle:
    """
    Spell-check capability: "is this a real word in language L?"

    Subclasses answer `is_misspelled`; they raise OracleUnavailableError
    (scramble.errors) when they cannot answer for a language at all.
    """
    id = "base"
    name = "Base"

    def is_misspelled(self, word: str, language: str = "en") -> bool:
        raise NotImplementedError("Override in subclass")
