"""Sync orchestrator - runs full synchronization passes over the vault."""

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from graphmap.errors import StorageError
from graphmap.storage.settings import SyncConfiguration
from graphmap.vault.nodes import NodeKind
from graphmap.vault.store import VaultStore

from .walker import TreeWalker
from .writer import IndexWrite, IndexWriter, WriteOutcome, is_generated_index

logger = logging.getLogger(__name__)


@dataclass
class SyncReport:
    """Outcome of one synchronization pass."""

    created: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    pruned: list[str] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def writes(self) -> int:
        return len(self.created) + len(self.updated) + len(self.pruned)

    @property
    def index_paths(self) -> set[str]:
        """Every index path this pass produced or confirmed."""
        return set(self.created) | set(self.updated) | set(self.unchanged) | set(self.failed)

    def record(self, write: IndexWrite) -> None:
        buckets = {
            WriteOutcome.CREATED: self.created,
            WriteOutcome.UPDATED: self.updated,
            WriteOutcome.UNCHANGED: self.unchanged,
            WriteOutcome.FAILED: self.failed,
        }
        bucket = buckets.get(write.outcome)
        if bucket is not None and write.index_path:
            bucket.append(write.index_path)

    def summary(self) -> str:
        return (
            f"{len(self.created)} created, {len(self.updated)} updated, "
            f"{len(self.unchanged)} unchanged, {len(self.failed)} failed, "
            f"{len(self.pruned)} pruned in {self.elapsed:.2f}s"
        )


class SyncOrchestrator:
    """Keeps the index container in step with the vault tree.

    The configuration is fetched once at the start of each pass. Passes never
    overlap: a pass requested while another runs waits for it to finish.
    """

    def __init__(
        self,
        store: VaultStore,
        get_config: Callable[[], SyncConfiguration],
    ) -> None:
        self.store = store
        self.get_config = get_config
        self._lock = threading.Lock()

    def synchronize_all(self, prune: bool = False) -> SyncReport:
        """Run a full synchronization pass.

        Raises StorageWriteError if the container folder cannot be created.
        Failures on individual indexes are logged and reported, not raised.
        """
        with self._lock:
            config = self.get_config()
            started = time.monotonic()

            self._ensure_container(config)

            writer = IndexWriter(self.store, config)
            walker = TreeWalker(self.store, config, writer.write_index)
            walker.walk(self.store.root())

            report = SyncReport()
            for write in walker.writes:
                report.record(write)

            if prune:
                report.pruned = self._prune_orphans(config, report.index_paths)

            report.elapsed = time.monotonic() - started
            logger.info(f"Graph maps synced: {report.summary()}")
            return report

    def _ensure_container(self, config: SyncConfiguration) -> None:
        container = config.index_container_path.strip("/")
        node = self.store.get(container)
        if node is None:
            logger.info(f"Creating index folder: {container}")
            self.store.create_folder(container)
        elif node.kind is not NodeKind.FOLDER:
            logger.warning(f"Index folder path is a file: {container}")

    def _prune_orphans(self, config: SyncConfiguration, keep: set[str]) -> list[str]:
        """Delete generated indexes whose folder no longer has content.

        Only files with the prefix and the generated-index tag are removed.
        """
        container = self.store.get(config.index_container_path.strip("/"))
        if container is None or container.kind is not NodeKind.FOLDER:
            return []

        pruned: list[str] = []
        for child in self.store.list_children(container):
            if child.kind is not NodeKind.FILE or not child.is_markdown:
                continue
            if not child.name.startswith(config.file_prefix) or child.path in keep:
                continue
            try:
                if not is_generated_index(self.store.read(child.path)):
                    continue
                self.store.delete(child.path)
            except StorageError as e:
                logger.warning(f"Failed to prune {child.path}: {e}")
                continue
            logger.info(f"Pruned orphaned index: {child.path}")
            pruned.append(child.path)
        return pruned
