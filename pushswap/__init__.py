"""Sort integers with a restricted set of two-stack operations, plus small maths helpers."""

__version__ = "0.1.0"