# Makes the folder importable as a package.
# Exports the history store and its record type.

from .history import HistoryStore, ProductRecord

__all__ = ["HistoryStore", "ProductRecord"]
