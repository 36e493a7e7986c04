"""PortDash CLI entry point.

Usage:
    python -m portdash                   # Web UI
    python -m portdash --list            # Print services and their URLs
    python -m portdash --open Plex       # Open a service in the browser
    python -m portdash --seed-categories # Add the default categories
"""

import argparse
import logging
import os
import sys
import webbrowser

from .config import get_db_url

logger = logging.getLogger("portdash")


def _open_session(db_url: str):
    from sqlmodel import SQLModel, Session, create_engine
    from . import models  # noqa: F401  (registers tables)

    engine = create_engine(db_url)
    SQLModel.metadata.create_all(engine)
    return Session(engine)


def list_services(db_url: str) -> int:
    """Print services grouped by category with their launch URLs."""
    from .store import get_or_create_settings, list_services as grouped_services
    from .utils.urls import build_url

    with _open_session(db_url) as session:
        settings = get_or_create_settings(session)
        groups = grouped_services(session)
        if not groups:
            print("No services")
            return 0
        for group in groups:
            print(group.category)
            for service in group.services:
                print(f"  {service.name:<30} {build_url(service, settings)}")
    return 0


def open_service(db_url: str, name: str) -> int:
    """Open a service, looked up by name, in the default browser."""
    from .store import find_service_by_name, get_or_create_settings
    from .utils.urls import build_url, can_open

    with _open_session(db_url) as session:
        service = find_service_by_name(session, name)
        if service is None:
            logger.error("No service named %r", name)
            return 1
        url = build_url(service, get_or_create_settings(session))

    if not can_open(url):
        logger.error("Cannot open %s: no host configured", url)
        return 1
    logger.info("Opening %s", url)
    webbrowser.open(url)
    return 0


def seed_categories(db_url: str) -> int:
    from .store import seed_default_categories

    with _open_session(db_url) as session:
        created = seed_default_categories(session)
    print(f"Added {len(created)} categories")
    return 0


def main():
    """Main entry point for PortDash."""
    parser = argparse.ArgumentParser(
        description="PortDash - launcher for self-hosted services",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m portdash                    Run the web UI
    python -m portdash --list             List services with URLs
    python -m portdash --open "Home Assistant"
    python -m portdash --version          Show version
        """
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    parser.add_argument(
        "--db-url",
        type=str,
        default=None,
        help="Database URL (default: $DATABASE_URL or sqlite:///portdash.db)",
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--list",
        action="store_true",
        help="List services grouped by category and exit",
    )
    action.add_argument(
        "--open",
        metavar="NAME",
        help="Open the named service in the browser and exit",
    )
    action.add_argument(
        "--seed-categories",
        action="store_true",
        help="Add the default categories and exit",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format='[%(asctime)s] %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if args.version:
        from . import __version__
        print(f"PortDash version {__version__}")
        sys.exit(0)

    if args.db_url:
        os.environ["DATABASE_URL"] = args.db_url
    db_url = get_db_url()

    if args.list:
        sys.exit(list_services(db_url))
    if args.open:
        sys.exit(open_service(db_url, args.open))
    if args.seed_categories:
        sys.exit(seed_categories(db_url))

    # Run full Reflex app with web UI
    print("Starting PortDash with web UI...")
    print(f"Database: {db_url}")
    print("Open http://localhost:3000 in your browser")

    try:
        import reflex as rx
        from . import portdash  # noqa: F401

        rx.utils.console.print("[bold green]PortDash[/bold green] - self-hosted service launcher")

        from reflex.reflex import cli
        sys.argv = [sys.argv[0], "run"]
        cli()

    except ImportError as e:
        print(f"Error importing Reflex: {e}")
        print("Make sure Reflex is installed: pip install reflex")
        sys.exit(1)


if __name__ == "__main__":
    main()
