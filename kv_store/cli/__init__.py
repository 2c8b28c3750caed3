from .interpreter import Interpreter
from .app import main, self_test


__all__ = [
    "Interpreter",
    "main",
    "self_test",
]
