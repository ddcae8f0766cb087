"""Two-stack integer sorting: a move generator, a move checker and the stack operations they share."""

__version__ = "1.0.0"