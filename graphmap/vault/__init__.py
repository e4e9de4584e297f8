"""Vault access - tree snapshots and file operations."""

from .nodes import ROOT_PATH, DocumentNode, File, Folder, NodeKind, join_path
from .store import VaultStore

__all__ = [
    "ROOT_PATH",
    "DocumentNode",
    "File",
    "Folder",
    "NodeKind",
    "VaultStore",
    "join_path",
]
