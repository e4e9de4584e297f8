"""File watcher - feeds filesystem events from the vault into the change gate.

Uses watchdog to monitor the vault directory. Only structural events matter
(create, delete, move); content edits never change an index.
"""

import logging
import os
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from graphmap.vault.nodes import DocumentNode, File, Folder

from .gate import ChangeGate, EventKind

logger = logging.getLogger(__name__)


class VaultEventHandler(FileSystemEventHandler):
    """Translates watchdog events into vault-relative change notifications."""

    def __init__(self, vault_path: Path, gate: ChangeGate) -> None:
        super().__init__()
        self.vault_path = vault_path
        self.gate = gate

    def _to_node(self, src_path: str | bytes, is_directory: bool) -> DocumentNode | None:
        path = Path(os.fsdecode(src_path))
        try:
            rel = path.relative_to(self.vault_path)
        except ValueError:
            return None

        if not rel.parts or any(part.startswith(".") for part in rel.parts):
            return None

        rel_path = rel.as_posix()
        if is_directory:
            return Folder(path=rel_path, name=rel.name)
        return File(path=rel_path, name=rel.name)

    def _notify(self, src_path: str | bytes, is_directory: bool, kind: EventKind) -> None:
        node = self._to_node(src_path, is_directory)
        if node is not None:
            self.gate.on_change(node, kind)

    def on_created(self, event: FileSystemEvent) -> None:
        self._notify(event.src_path, event.is_directory, EventKind.CREATED)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._notify(event.src_path, event.is_directory, EventKind.DELETED)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._notify(event.src_path, event.is_directory, EventKind.RENAMED)
        if event.dest_path and event.dest_path != event.src_path:
            self._notify(event.dest_path, event.is_directory, EventKind.RENAMED)


def start_watcher(vault_path: Path, gate: ChangeGate) -> Observer:  # type: ignore[valid-type]
    """Start watching the vault for structural changes.

    Returns the Observer instance (call .stop() to shut down).
    """
    handler = VaultEventHandler(vault_path, gate)
    observer = Observer()
    observer.schedule(handler, str(vault_path), recursive=True)
    observer.daemon = True
    observer.start()
    logger.info(f"Watching {vault_path} for changes")
    return observer
