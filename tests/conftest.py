"""Shared test fixtures."""

from pathlib import Path

import pytest

from graphmap.storage import SyncConfiguration
from graphmap.vault import VaultStore


class RecordingStore(VaultStore):
    """VaultStore that remembers every write it performs."""

    def __init__(self, vault_path: Path) -> None:
        super().__init__(vault_path)
        self.writes: list[tuple[str, str]] = []

    def create(self, path, content):
        self.writes.append(("create", path))
        return super().create(path, content)

    def create_folder(self, path):
        self.writes.append(("create_folder", path))
        return super().create_folder(path)

    def modify(self, path, content):
        self.writes.append(("modify", path))
        return super().modify(path, content)

    def delete(self, path):
        self.writes.append(("delete", path))
        return super().delete(path)


class FakeTimer:
    """Timer that only fires when the test says so."""

    def __init__(self, delay, fn) -> None:
        self.delay = delay
        self.fn = fn
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        if not self.cancelled:
            self.fn()


@pytest.fixture
def tmp_vault(tmp_path: Path) -> Path:
    """Create a temporary vault directory with sample notes."""
    vault = tmp_path / "vault"
    vault.mkdir()

    (vault / "Welcome.md").write_text("# Welcome\n")

    # Subfolder with notes
    notes = vault / "Notes"
    notes.mkdir()
    (notes / "a.md").write_text("Note a")
    (notes / "b.md").write_text("Note b")
    (notes / "diagram.png").write_bytes(b"\x89PNG")

    # Nested folder with a space in its name
    project = vault / "Projects" / "Big Plan"
    project.mkdir(parents=True)
    (project / "Plan.md").write_text("- [ ] Start")

    # Folder without any notes
    attachments = vault / "Attachments"
    attachments.mkdir()
    (attachments / "photo.jpg").write_bytes(b"\xff\xd8")

    # Obsidian config folder
    obsidian = vault / ".obsidian"
    obsidian.mkdir()
    (obsidian / "workspace.md").write_text("hidden")

    return vault


@pytest.fixture
def store(tmp_vault: Path) -> RecordingStore:
    return RecordingStore(tmp_vault)


@pytest.fixture
def config() -> SyncConfiguration:
    return SyncConfiguration()


@pytest.fixture
def timers() -> list[FakeTimer]:
    return []


@pytest.fixture
def timer_factory(timers: list[FakeTimer]):
    def factory(delay, fn):
        timer = FakeTimer(delay, fn)
        timers.append(timer)
        return timer

    return factory
