"""
Dictionary submodule.

Re-exports the headword store used by the reader's lookup view.
"""

from greekreader.dictionary._store import DictionaryEntry, DictionaryStore

__all__ = ["DictionaryEntry", "DictionaryStore"]
