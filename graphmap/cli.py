"""CLI interface for graphmap - rebuild, watch and configure from the terminal."""

import argparse
import logging
import sys

from graphmap.config import Settings, get_settings
from graphmap.errors import StorageError
from graphmap.main import Colors, build_orchestrator, run_watch, setup_locale, setup_logging
from graphmap.storage import SettingsStorage


def cmd_rebuild(settings: Settings, args: argparse.Namespace) -> int:
    """Force a full rebuild, bypassing the change gate."""
    logger = logging.getLogger(__name__)
    orchestrator, _ = build_orchestrator(settings)

    try:
        report = orchestrator.synchronize_all(prune=args.prune)
    except StorageError as e:
        logger.error(f"{Colors.RED}Rebuild failed: {e}{Colors.RESET}")
        return 1

    print(f"{Colors.GREEN}✓ {report.summary()}{Colors.RESET}")
    if report.failed:
        for path in report.failed:
            print(f"  {Colors.RED}✗ {path}{Colors.RESET}")
        return 1
    return 0


def cmd_watch(settings: Settings, args: argparse.Namespace) -> int:
    run_watch(settings)
    return 0


def cmd_config(settings: Settings, args: argparse.Namespace) -> int:
    """Show or update the persisted sync configuration."""
    storage = SettingsStorage(settings.vault_path)

    updates = {}
    if args.container is not None:
        updates["index_container_path"] = args.container
    if args.prefix is not None:
        updates["file_prefix"] = args.prefix
    if args.auto_sync is not None:
        updates["auto_sync_enabled"] = args.auto_sync

    if updates:
        config = storage.update(**updates)
        changes = ", ".join(f"{k}={v}" for k, v in updates.items())
        print(f"{Colors.GREEN}Settings updated: {changes}{Colors.RESET}")
        print(f"{Colors.DIM}Changes apply to the next sync.{Colors.RESET}")
    else:
        config = storage.get()

    for key, value in config.to_dict().items():
        print(f"{key}: {value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphmap",
        description="Keep folder graph map notes in sync with an Obsidian vault.",
    )
    parser.add_argument(
        "--vault",
        type=str,
        help="Path to the vault (overrides GRAPHMAP_VAULT_PATH)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    rebuild = subparsers.add_parser("rebuild", help="Regenerate all graph maps now")
    rebuild.add_argument(
        "--prune",
        action="store_true",
        help="Also delete graph maps for folders that no longer have notes",
    )
    rebuild.set_defaults(func=cmd_rebuild)

    watch = subparsers.add_parser("watch", help="Sync, then resync on vault changes")
    watch.set_defaults(func=cmd_watch)

    config = subparsers.add_parser("config", help="Show or change sync settings")
    config.add_argument("--container", type=str, help="Folder that holds the graph maps")
    config.add_argument("--prefix", type=str, help="File name prefix for graph maps")
    config.add_argument(
        "--auto-sync",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Resync automatically on vault changes (watch must be restarted)",
    )
    config.set_defaults(func=cmd_config)

    return parser


def cli(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_locale()

    overrides = {}
    if args.vault:
        overrides["vault_path"] = args.vault
    if args.verbose:
        overrides["log_level"] = "DEBUG"

    # Load settings
    try:
        settings = get_settings(**overrides)
    except Exception as e:
        setup_logging()
        logger = logging.getLogger(__name__)
        logger.error(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        logger.error(
            f"{Colors.RED}Pass --vault or set GRAPHMAP_VAULT_PATH in a .env file.{Colors.RESET}"
        )
        sys.exit(1)

    setup_logging(settings.log_level)
    logging.getLogger(__name__).info(f"{Colors.DIM}Vault: {settings.vault_path}{Colors.RESET}")

    exit_code = args.func(settings, args)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    cli()
