"""Personal tools: fund book, hand book, bookmarks, contract stats and notes."""

__all__ = ["bookmark", "contractstats", "fundbook", "handbook", "note"]