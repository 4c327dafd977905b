"""Price list model, sort keys and market data parsers."""

__all__ = ["data", "model", "sort"]