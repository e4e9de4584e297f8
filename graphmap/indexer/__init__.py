"""Folder indexing - builds and writes graph map notes for the vault tree."""

from .naming import canonicalize, index_name, index_path
from .sync import SyncOrchestrator, SyncReport
from .walker import ChildEntries, LinkEntry, TreeWalker, compute_child_entries
from .writer import IndexWrite, IndexWriter, WriteOutcome, is_generated_index, render_index

__all__ = [
    "ChildEntries",
    "IndexWrite",
    "IndexWriter",
    "LinkEntry",
    "SyncOrchestrator",
    "SyncReport",
    "TreeWalker",
    "WriteOutcome",
    "canonicalize",
    "compute_child_entries",
    "index_name",
    "index_path",
    "is_generated_index",
    "render_index",
]
