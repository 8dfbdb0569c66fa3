"""Sort integers with push_swap stack operations and report the moves."""

__version__ = "0.1.0"
__all__ = ["__version__"]