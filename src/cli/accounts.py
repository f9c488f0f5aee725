"""
Admin account management commands.

Usage:
    python -m src.cli.accounts create-admin [--username USERNAME]
    python -m src.cli.accounts disable USERNAME
    python -m src.cli.accounts enable USERNAME
    python -m src.cli.accounts sessions USERNAME

create-admin reads ADMIN_USERNAME and ADMIN_PASSWORD from the environment and
prompts for whichever is missing.
"""

import argparse
import asyncio
import getpass
import logging
import os
import sys

from config import ApplicationConfig, ConfigurationError
from src.adapter.database import Database
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.accounts import (
    ListAccountSessionsUseCase,
    ProvisionAdminUseCase,
    SetAccountDisabledUseCase,
)
from src.domain.base import isoformat

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _read_credentials(username=None):
    username = username or os.environ.get("ADMIN_USERNAME") or input("Username: ").strip()
    password = os.environ.get("ADMIN_PASSWORD") or getpass.getpass("Password: ")
    return username, password


async def _run(use_case_cls, *args):
    database = Database(ApplicationConfig.database_url(), echo=ApplicationConfig.DB_ECHO)
    try:
        await database.ensure_indexes()
        async with database.session() as session:
            return await use_case_cls(SqlAlchemyUnitOfWork(session)).execute(*args)
    finally:
        await database.dispose()


def cmd_create_admin(username=None) -> int:
    """Create the admin account or rotate its password."""
    username, password = _read_credentials(username)
    result = asyncio.run(_run(ProvisionAdminUseCase, username, password))
    if result.is_err():
        logger.error(f"create-admin failed: {result.error.message}")
        return 1

    data = result.value
    action = "Created" if data.created else "Updated"
    logger.info(f"{action} admin account {data.username} ({data.account_id})")
    return 0


def cmd_set_disabled(username: str, disabled: bool) -> int:
    result = asyncio.run(_run(SetAccountDisabledUseCase, username, disabled))
    if result.is_err():
        logger.error(result.error.message)
        return 1

    state = "disabled" if result.value.disabled else "enabled"
    logger.info(f"Account {result.value.username} {state}")
    return 0


def cmd_sessions(username: str) -> int:
    """Print an account's sessions, newest first. Tokens are never shown."""
    result = asyncio.run(_run(ListAccountSessionsUseCase, username))
    if result.is_err():
        logger.error(result.error.message)
        return 1

    for summary in result.value.sessions:
        state = "active" if summary.active else f"revoked {isoformat(summary.revoked_at)}"
        print(
            f"{summary.session_id}  {state:<34}  "
            f"created {isoformat(summary.created_at)}  "
            f"last seen {isoformat(summary.last_seen_at)}  "
            f"ip={summary.client_ip or '-'}  label={summary.label or '-'}"
        )
    return 0


def main(argv=None) -> None:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="Admin account management",
        prog="python -m src.cli.accounts"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    create_admin = subparsers.add_parser(
        "create-admin",
        help="Create the admin account or rotate its password"
    )
    create_admin.add_argument("--username", help="Defaults to $ADMIN_USERNAME")

    for name, help_text in (
        ("disable", "Block logins for an account"),
        ("enable", "Allow logins for an account"),
        ("sessions", "List an account's sessions"),
    ):
        subparser = subparsers.add_parser(name, help=help_text)
        subparser.add_argument("username")

    args = parser.parse_args(argv)

    try:
        ApplicationConfig.validate(required=("DB_URI", "DB_NAME"))
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)

    if args.command == "create-admin":
        sys.exit(cmd_create_admin(args.username))
    elif args.command == "disable":
        sys.exit(cmd_set_disabled(args.username, True))
    elif args.command == "enable":
        sys.exit(cmd_set_disabled(args.username, False))
    elif args.command == "sessions":
        sys.exit(cmd_sessions(args.username))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
