"""Filesystem-backed vault storage."""

import logging
import shutil
from pathlib import Path

from graphmap.errors import StorageReadError, StorageWriteError

from .nodes import ROOT_PATH, DocumentNode, File, Folder, join_path

logger = logging.getLogger(__name__)


class VaultStore:
    """Reads and writes vault files by vault-relative path.

    Paths use forward slashes and have no leading slash; the vault root is "/".
    Hidden entries (names starting with ".") are invisible to listings.
    """

    def __init__(self, vault_path: Path) -> None:
        self.vault_path = vault_path

    def _resolve(self, path: str) -> Path:
        if path in (ROOT_PATH, ""):
            return self.vault_path
        return self.vault_path / path.strip("/")

    def root(self) -> Folder:
        return Folder(path=ROOT_PATH, name=self.vault_path.name)

    def get(self, path: str) -> DocumentNode | None:
        """Get the node at a path, or None if nothing exists there."""
        if path in (ROOT_PATH, ""):
            return self.root()

        full_path = self._resolve(path)
        rel_path = path.strip("/")
        if full_path.is_dir():
            return Folder(path=rel_path, name=full_path.name)
        if full_path.is_file():
            return File(path=rel_path, name=full_path.name)
        return None

    def list_children(self, folder: Folder) -> list[DocumentNode]:
        """List the direct children of a folder, in filesystem order."""
        full_path = self._resolve(folder.path)
        try:
            entries = list(full_path.iterdir())
        except OSError as e:
            raise StorageReadError(folder.path, f"cannot list folder: {e}") from e

        children: list[DocumentNode] = []
        for entry in entries:
            if entry.name.startswith("."):
                continue
            child_path = join_path(folder.path, entry.name)
            if entry.is_dir():
                children.append(Folder(path=child_path, name=entry.name))
            elif entry.is_file():
                children.append(File(path=child_path, name=entry.name))
        return children

    @staticmethod
    def _encode(path: str, content: str) -> bytes:
        # Undecodable file names surface as lone surrogates in links
        try:
            return content.encode("utf-8")
        except UnicodeEncodeError as e:
            raise StorageWriteError(path, f"content is not valid UTF-8: {e}") from e

    def read(self, path: str) -> str:
        try:
            return self._resolve(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(path, f"cannot read file: {e}") from e

    def create(self, path: str, content: str) -> File:
        """Create a new file. Fails if something already exists at the path."""
        full_path = self._resolve(path)
        data = self._encode(path, content)
        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            with full_path.open("xb") as f:
                f.write(data)
        except FileExistsError as e:
            raise StorageWriteError(path, "file already exists") from e
        except OSError as e:
            raise StorageWriteError(path, f"cannot create file: {e}") from e
        return File(path=path, name=full_path.name)

    def create_folder(self, path: str) -> Folder:
        full_path = self._resolve(path)
        try:
            full_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageWriteError(path, f"cannot create folder: {e}") from e
        return Folder(path=path, name=full_path.name)

    def modify(self, path: str, content: str) -> None:
        """Overwrite the content of an existing file."""
        full_path = self._resolve(path)
        if not full_path.is_file():
            raise StorageWriteError(path, "file does not exist")
        data = self._encode(path, content)
        try:
            full_path.write_bytes(data)
        except OSError as e:
            raise StorageWriteError(path, f"cannot write file: {e}") from e

    def delete(self, path: str) -> None:
        full_path = self._resolve(path)
        try:
            if full_path.is_dir():
                shutil.rmtree(full_path)
            else:
                full_path.unlink()
        except OSError as e:
            raise StorageWriteError(path, f"cannot delete: {e}") from e
        logger.debug(f"Deleted {path}")
