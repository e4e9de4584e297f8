"""Flat, filesystem-safe names for generated index files."""

import re

from graphmap.vault.nodes import ROOT_PATH

ROOT_TOKEN = "ROOT"

_SEPARATORS = re.compile(r"[/\\]")
_WHITESPACE = re.compile(r"\s")


def canonicalize(path: str) -> str:
    """Turn a vault path into a single name token.

    "/" becomes "ROOT"; slashes and backslashes become "_" and each
    whitespace character becomes "-".
    """
    if path == ROOT_PATH:
        return ROOT_TOKEN
    return _WHITESPACE.sub("-", _SEPARATORS.sub("_", path))


def index_name(path: str, prefix: str) -> str:
    """Link target (no folder, no extension) of the index for a folder path."""
    return f"{prefix}{canonicalize(path)}"


def index_path(path: str, container: str, prefix: str) -> str:
    """Vault path of the generated index for a folder path."""
    return f"{container.strip('/')}/{index_name(path, prefix)}.md"
