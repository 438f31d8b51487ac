"""Sort integers on two stacks with a fixed set of stack operations, and print them."""

__version__ = "1.0.0"
__all__ = ["__version__"]