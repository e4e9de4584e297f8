"""Index writer - renders a folder's index note and writes it only when it changed."""

import logging
import re
from dataclasses import dataclass
from enum import Enum

import yaml

from graphmap.errors import StorageError
from graphmap.storage.settings import SyncConfiguration
from graphmap.vault.nodes import Folder, NodeKind
from graphmap.vault.store import VaultStore

from .naming import index_path
from .walker import LinkEntry

logger = logging.getLogger(__name__)

GRAPH_MAP_TAG = "auto-graph-map"
HEADING_GLYPH = "🗺️"


class WriteOutcome(Enum):
    SKIPPED = "skipped"  # no links, nothing written
    UNCHANGED = "unchanged"
    CREATED = "created"
    UPDATED = "updated"
    FAILED = "failed"


@dataclass
class IndexWrite:
    """Result of writing one folder's index."""

    folder_path: str
    outcome: WriteOutcome
    index_path: str | None = None
    error: str | None = None


def render_front_matter() -> str:
    front = yaml.safe_dump(
        {"tags": [GRAPH_MAP_TAG]},
        default_flow_style=None,
        allow_unicode=True,
        sort_keys=False,
    )
    return f"---\n{front}---\n"


def render_index(folder_name: str, links: list[LinkEntry]) -> str:
    """Build the full markdown content of an index note."""
    lines = "\n".join(link.render() for link in links)
    return f"{render_front_matter()}# {HEADING_GLYPH} {folder_name}\n\n{lines}\n"


def parse_front_matter(content: str) -> dict:
    """Parse YAML front matter from note content."""
    if not content.startswith("---"):
        return {}

    match = re.match(r"^---\n(.*?)\n---", content, re.DOTALL)
    if not match:
        return {}

    try:
        data = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError:
        return {}
    return data if isinstance(data, dict) else {}


def is_generated_index(content: str) -> bool:
    """Check whether a note carries the generated-index tag."""
    tags = parse_front_matter(content).get("tags", [])
    if isinstance(tags, str):
        tags = [tags]
    return isinstance(tags, list) and GRAPH_MAP_TAG in tags


class IndexWriter:
    """Creates or updates index notes inside the container folder."""

    def __init__(self, store: VaultStore, config: SyncConfiguration) -> None:
        self.store = store
        self.config = config

    def target_path(self, folder: Folder) -> str:
        return index_path(folder.path, self.config.index_container_path, self.config.file_prefix)

    def write_index(self, folder: Folder, links: list[LinkEntry]) -> IndexWrite:
        """Write the index for a folder.

        Does nothing when there are no links; an existing index is left as is.
        Existing content is compared first so unchanged indexes are never rewritten.
        """
        if not links:
            return IndexWrite(folder_path=folder.path, outcome=WriteOutcome.SKIPPED)

        path = self.target_path(folder)
        content = render_index(folder.name, links)

        try:
            outcome = self._write(path, content)
        except StorageError as e:
            logger.error(f"Failed to write index for {folder.path}: {e}")
            return IndexWrite(
                folder_path=folder.path,
                outcome=WriteOutcome.FAILED,
                index_path=path,
                error=str(e),
            )

        if outcome is WriteOutcome.UNCHANGED:
            logger.debug(f"Index unchanged: {path}")
        else:
            logger.info(f"Index {outcome.value}: {path}")
        return IndexWrite(folder_path=folder.path, outcome=outcome, index_path=path)

    def _write(self, path: str, content: str) -> WriteOutcome:
        existing = self.store.get(path)

        if existing is None:
            self.store.create(path, content)
            return WriteOutcome.CREATED

        if existing.kind is not NodeKind.FILE:
            raise StorageError(path, "index path is occupied by a folder")

        if self.store.read(path) == content:
            return WriteOutcome.UNCHANGED

        self.store.modify(path, content)
        return WriteOutcome.UPDATED
