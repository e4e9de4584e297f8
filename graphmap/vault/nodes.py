"""Vault tree snapshot types."""

from dataclasses import dataclass
from enum import Enum

ROOT_PATH = "/"
MARKDOWN_EXTENSION = "md"


class NodeKind(Enum):
    FOLDER = "folder"
    FILE = "file"


@dataclass(frozen=True)
class Folder:
    """A folder in the vault. The root folder has path "/"."""

    path: str
    name: str

    kind = NodeKind.FOLDER


@dataclass(frozen=True)
class File:
    """A file in the vault."""

    path: str
    name: str

    kind = NodeKind.FILE

    @property
    def extension(self) -> str:
        _, dot, ext = self.name.rpartition(".")
        return ext if dot else ""

    @property
    def basename(self) -> str:
        stem, dot, _ = self.name.rpartition(".")
        return stem if dot else self.name

    @property
    def is_markdown(self) -> bool:
        return self.extension == MARKDOWN_EXTENSION


DocumentNode = Folder | File


def join_path(parent: str, name: str) -> str:
    """Join a vault-relative folder path and a child name."""
    if parent == ROOT_PATH:
        return name
    return f"{parent}/{name}"
