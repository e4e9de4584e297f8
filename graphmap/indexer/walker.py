"""Tree walker - visits folders post-order and collects index links."""

import locale
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from graphmap.errors import StorageReadError
from graphmap.storage.settings import SyncConfiguration
from graphmap.vault.nodes import DocumentNode, Folder, NodeKind
from graphmap.vault.store import VaultStore

from .naming import index_name

if TYPE_CHECKING:
    from .writer import IndexWrite

logger = logging.getLogger(__name__)

FOLDER_GLYPH = "📂"
DOCUMENT_GLYPH = "📄"


@dataclass(frozen=True)
class LinkEntry:
    """One line of an index note."""

    target: str
    glyph: str
    label: str

    def render(self) -> str:
        return f"- [[{self.target}|{self.glyph} {self.label}]]"


@dataclass
class ChildEntries:
    """Candidate links for a folder, in display order.

    Folder candidates only become links once their own index exists, so
    subfolders must be synchronized before calling links().
    """

    candidates: list[tuple[DocumentNode, LinkEntry]] = field(default_factory=list)

    @property
    def subfolders(self) -> list[Folder]:
        return [node for node, _ in self.candidates if node.kind is NodeKind.FOLDER]

    def links(self, indexed_folders: set[str]) -> list[LinkEntry]:
        return [
            entry
            for node, entry in self.candidates
            if node.kind is NodeKind.FILE or node.path in indexed_folders
        ]


def sort_by_name(children: list[DocumentNode]) -> list[DocumentNode]:
    """Sort nodes by name using the process locale's collation (see setup_locale)."""
    return sorted(children, key=lambda node: locale.strxfrm(node.name))


def is_in_container(path: str, config: SyncConfiguration) -> bool:
    container = config.index_container_path.strip("/")
    return path == container or path.startswith(f"{container}/")


def compute_child_entries(
    children: list[DocumentNode], config: SyncConfiguration
) -> ChildEntries:
    """Pick the children that belong in an index and build their link entries."""
    result = ChildEntries()

    for child in sort_by_name(children):
        if child.kind is NodeKind.FOLDER:
            if child.name == config.index_container_name or is_in_container(child.path, config):
                continue
            entry = LinkEntry(
                target=index_name(child.path, config.file_prefix),
                glyph=FOLDER_GLYPH,
                label=child.name,
            )
            result.candidates.append((child, entry))
        elif child.kind is NodeKind.FILE:
            if not child.is_markdown or is_in_container(child.path, config):
                continue
            entry = LinkEntry(target=child.path, glyph=DOCUMENT_GLYPH, label=child.basename)
            result.candidates.append((child, entry))

    return result


class TreeWalker:
    """Synchronizes a folder's subtree, children before parents."""

    def __init__(
        self,
        store: VaultStore,
        config: SyncConfiguration,
        write_index: Callable[[Folder, list[LinkEntry]], "IndexWrite"],
    ) -> None:
        self.store = store
        self.config = config
        self.write_index = write_index
        self.writes: list["IndexWrite"] = []

    def walk(self, folder: Folder) -> bool:
        """Synchronize a folder and everything below it.

        Returns True if the folder has qualifying content (and so an index).
        """
        try:
            children = self.store.list_children(folder)
        except StorageReadError as e:
            # Folder vanished or became unreadable mid-pass; next sync reconciles
            logger.warning(f"Skipping {folder.path}: {e}")
            return False

        entries = compute_child_entries(children, self.config)

        indexed = {sub.path for sub in entries.subfolders if self.walk(sub)}
        links = entries.links(indexed)

        self.writes.append(self.write_index(folder, links))
        return bool(links)
