"""Crypto price list, bookkeeping list models and supporting utilities."""

__version__ = "1.9.5"