"""Exceptions raised by graphmap."""


class GraphMapError(Exception):
    """Base class for graphmap errors."""


class StorageError(GraphMapError):
    """A vault storage operation failed."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class StorageReadError(StorageError):
    """Reading a file or listing a folder failed."""


class StorageWriteError(StorageError):
    """Creating, modifying or deleting a file or folder failed."""
