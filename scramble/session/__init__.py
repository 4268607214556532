from .config import SessionConfig
from .core import Session, restart, start_round, submit
from .state import RoundState

__all__ = ["Session", "SessionConfig", "RoundState", "start_round", "submit", "restart"]
