"""Stack-based evaluator for arithmetic expressions with sin, cos, tg, sqrt and ln."""

__version__ = "0.1.0"
__all__ = ["expression"]