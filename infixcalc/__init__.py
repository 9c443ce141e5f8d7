"""Convert integer infix expressions to postfix notation and evaluate them."""

__version__ = "0.1.0"
__all__ = ["structures", "postfix", "infix", "cli"]