"""Main entry point for the graphmap watcher."""

import locale
import logging
import sys
import time

from graphmap.config import Settings, get_settings
from graphmap.errors import StorageError
from graphmap.indexer import SyncOrchestrator
from graphmap.storage import SettingsStorage
from graphmap.vault import VaultStore
from graphmap.watcher import ChangeGate, start_watcher


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level, logging.INFO),
    )
    # Reduce noise from libraries
    logging.getLogger("watchdog").setLevel(logging.WARNING)


def setup_locale() -> None:
    """Use the user's locale for collation, so index entries sort the way they expect.

    Without this the process keeps the C locale and names sort by code point.
    """
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logging.getLogger(__name__).debug("Locale not available, using default collation")


def build_orchestrator(settings: Settings) -> tuple[SyncOrchestrator, SettingsStorage]:
    storage = SettingsStorage(settings.vault_path)
    store = VaultStore(settings.vault_path)
    # Re-read persisted settings at the start of every pass
    return SyncOrchestrator(store, storage.reload), storage


def run_watch(settings: Settings) -> None:
    """Sync once, then keep the indexes in sync until interrupted."""
    logger = logging.getLogger(__name__)
    orchestrator, storage = build_orchestrator(settings)

    try:
        orchestrator.synchronize_all()
    except StorageError as e:
        logger.error(f"{Colors.RED}Initial sync failed: {e}{Colors.RESET}")

    if not storage.get().auto_sync_enabled:
        logger.info(f"{Colors.YELLOW}Auto sync is disabled, not watching.{Colors.RESET}")
        return

    gate = ChangeGate(storage.get, orchestrator.synchronize_all, delay=settings.debounce_seconds)
    observer = start_watcher(settings.vault_path, gate)
    logger.info(f"{Colors.GREEN}{Colors.BOLD}Graphmap watching ✓{Colors.RESET}")

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info(f"{Colors.DIM}Stopping...{Colors.RESET}")
    finally:
        observer.stop()
        observer.join()
        gate.cancel()


def main() -> None:
    """Run the graphmap watcher."""
    setup_locale()
    try:
        settings = get_settings()
    except Exception as e:
        setup_logging()
        logger = logging.getLogger(__name__)
        logger.error(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        logger.error(
            f"{Colors.RED}Make sure GRAPHMAP_VAULT_PATH is set or a .env file exists.{Colors.RESET}"
        )
        sys.exit(1)

    setup_logging(settings.log_level)
    logging.getLogger(__name__).info(f"{Colors.DIM}Vault: {settings.vault_path}{Colors.RESET}")
    run_watch(settings)


if __name__ == "__main__":
    main()
