"""Sync configuration stored inside the vault."""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONTAINER = "_GraphMaps"
DEFAULT_PREFIX = "Map_"


@dataclass
class SyncConfiguration:
    """User-configurable settings for index generation."""

    index_container_path: str = DEFAULT_CONTAINER
    file_prefix: str = DEFAULT_PREFIX
    auto_sync_enabled: bool = True

    @property
    def index_container_name(self) -> str:
        """Last segment of the container path."""
        return self.index_container_path.strip("/").rsplit("/", 1)[-1]

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SyncConfiguration":
        """Build a configuration, falling back to defaults field by field."""
        defaults = cls()
        values = {}
        for f in fields(cls):
            default = getattr(defaults, f.name)
            value = data.get(f.name, default)
            # bool is checked exactly so 0/1 don't pass as flags
            if type(value) is not type(default):
                logger.warning(f"Ignoring invalid value for {f.name}: {value!r}")
                value = default
            values[f.name] = value
        return cls(**values)


class SettingsStorage:
    """Manages sync configuration stored in .graphmap/settings.json."""

    def __init__(self, vault_path: Path) -> None:
        self.vault_path = vault_path
        self.graphmap_dir = vault_path / ".graphmap"
        self.settings_file = self.graphmap_dir / "settings.json"
        self._settings: SyncConfiguration | None = None

    def get(self) -> SyncConfiguration:
        """Get current settings, loading from disk or creating defaults."""
        if self._settings is None:
            self._settings = self._load()
        return self._settings

    def reload(self) -> SyncConfiguration:
        """Drop the cached settings and read them from disk again."""
        self._settings = None
        return self.get()

    def update(self, **kwargs) -> SyncConfiguration:
        """Update specific settings and save to disk."""
        settings = self.get()

        # Update only known fields
        for key, value in kwargs.items():
            if hasattr(settings, key) and key != "index_container_name":
                setattr(settings, key, value)

        self._save(settings)
        self._settings = settings
        return settings

    def _load(self) -> SyncConfiguration:
        """Load settings from disk, creating defaults if missing."""
        if not self.settings_file.exists():
            settings = SyncConfiguration()
            self._save(settings)
            return settings

        try:
            data = json.loads(self.settings_file.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load settings, using defaults: {e}")
            return SyncConfiguration()

        if not isinstance(data, dict):
            logger.warning("Settings file is not a JSON object, using defaults")
            return SyncConfiguration()
        return SyncConfiguration.from_dict(data)

    def _save(self, settings: SyncConfiguration) -> None:
        """Save settings to disk."""
        try:
            self.graphmap_dir.mkdir(parents=True, exist_ok=True)
            self.settings_file.write_text(
                json.dumps(settings.to_dict(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            logger.error(f"Failed to save settings: {e}")
