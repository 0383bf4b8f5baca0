"""Script to run database migrations."""

import sys

from alembic import command
from alembic.config import Config


def run_migrations(revision: str = "head") -> None:
    """Upgrade the clinic schema to ``revision``."""
    alembic_cfg = Config("alembic.ini")

    try:
        print(f"Upgrading clinic schema to {revision}...")
        command.upgrade(alembic_cfg, revision)
        print("✓ Clinic schema is up to date")
    except Exception as e:
        print(f"✗ Migration failed: {e}", file=sys.stderr)
        sys.exit(1)


def create_migration(message: str) -> None:
    """Autogenerate a revision from the table definitions in clinic_admin.models."""
    alembic_cfg = Config("alembic.ini")

    try:
        print(f"Creating migration: {message}")
        command.revision(alembic_cfg, message=message, autogenerate=True)
        print("✓ Migration created")
    except Exception as e:
        print(f"✗ Migration creation failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    args = sys.argv[1:]
    if not args:
        run_migrations()
    elif args[0] == "create" and len(args) > 1:
        create_migration(" ".join(args[1:]))
    elif args[0] == "upgrade" and len(args) == 2:
        run_migrations(args[1])
    else:
        print("Usage: python scripts/migrate.py [create <message> | upgrade <revision>]")
        sys.exit(2)
