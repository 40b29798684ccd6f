"""Administrative commands.

Usage:
    python -m confsite.cli init-db
    python -m confsite.cli seed
    python -m confsite.cli create-admin admin@example.com --password secret123
    python -m confsite.cli import-csv committees committees.csv
    python -m confsite.cli export-csv gallery --output gallery.csv
"""

import argparse
import asyncio
import getpass
import logging
import sys
from pathlib import Path

from confsite.config import Settings, configure_logging, get_settings
from confsite.db import Database
from confsite.services.auth import AdminAccountService, AuthService
from confsite.services.csv_transfer import CSVTransferService, TransferDataset
from confsite.services.seed import seed_defaults

logger = logging.getLogger(__name__)


async def init_db(database: Database, args: argparse.Namespace, settings: Settings) -> None:
    """Create all tables (development databases; production uses alembic)."""
    await database.create_all()
    if args.seed:
        await seed(database, args, settings)


async def seed(database: Database, args: argparse.Namespace, settings: Settings) -> None:
    async with database.session_maker() as session:
        seeded = await seed_defaults(session)
        await session.commit()
    print(f"Seeded: {', '.join(seeded) if seeded else 'nothing (already populated)'}")


async def create_admin(database: Database, args: argparse.Namespace, settings: Settings) -> None:
    password = args.password or getpass.getpass("Password: ")
    if len(password) < 8:
        raise ValueError("Password must be at least 8 characters")

    async with database.session_maker() as session:
        accounts = AdminAccountService(session, AuthService(settings))
        user = await accounts.create(args.email, password)
        await session.commit()
    print(f"Created admin {user.email}")


async def import_csv(database: Database, args: argparse.Namespace, settings: Settings) -> None:
    content = Path(args.file).read_bytes()
    async with database.session_maker() as session:
        try:
            imported = await CSVTransferService(session).import_csv(args.dataset, content)
            await session.commit()
        except Exception:
            await session.rollback()
            raise
    print(f"Imported {imported} {args.dataset.value} rows")


async def export_csv(database: Database, args: argparse.Namespace, settings: Settings) -> None:
    async with database.session_maker() as session:
        data = await CSVTransferService(session).export_csv(args.dataset)

    if args.output == "-":
        sys.stdout.write(data.decode("utf-8"))
    else:
        output = Path(args.output or args.dataset.filename)
        output.write_bytes(data)
        print(f"Wrote {output}")


COMMANDS = {
    "init-db": init_db,
    "seed": seed,
    "create-admin": create_admin,
    "import-csv": import_csv,
    "export-csv": export_csv,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="confsite",
        description="Manage the conference website database.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create database tables")
    init_parser.add_argument("--seed", action="store_true", help="Insert default content afterwards")

    subparsers.add_parser("seed", help="Insert default content into empty collections")

    admin_parser = subparsers.add_parser("create-admin", help="Create a dashboard account")
    admin_parser.add_argument("email")
    admin_parser.add_argument("--password", help="Prompted for when omitted")

    import_parser = subparsers.add_parser("import-csv", help="Replace a collection from CSV")
    import_parser.add_argument("dataset", type=TransferDataset, choices=list(TransferDataset))
    import_parser.add_argument("file")

    export_parser = subparsers.add_parser("export-csv", help="Export a collection to CSV")
    export_parser.add_argument("dataset", type=TransferDataset, choices=list(TransferDataset))
    export_parser.add_argument(
        "--output",
        "-o",
        help="Output path, '-' for stdout (default: <dataset>.csv)",
    )

    return parser


async def run(args: argparse.Namespace, settings: Settings) -> None:
    database = Database.from_settings(settings)
    try:
        await COMMANDS[args.command](database, args, settings)
    finally:
        await database.dispose()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings)

    # Suppress SQLAlchemy's noisy SQL query logging
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    try:
        asyncio.run(run(args, settings))
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
