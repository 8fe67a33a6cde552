#!/usr/bin/env python3
"""
Database management script for the VA operations backend.
Creates and drops the time reporting tables for local development.
"""

import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from vaops.config import get_settings
from vaops.infrastructure.db.database import Database


def create_tables(database: Database):
    """Create every table that does not exist yet."""
    print(f"Creating tables on {database.database_url}...")
    database.create_all()
    print("Done.")


def reset_database(database: Database):
    """Reset database - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        print("Resetting database...")
        database.drop_all()
        database.create_all()
    else:
        print("Database reset cancelled.")


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  create         - Create missing tables")
        print("  reset          - Reset database (WARNING: drops all data)")
        return

    database = Database(get_settings().database_url)
    command_name = sys.argv[1]

    try:
        if command_name == "create":
            create_tables(database)
        elif command_name == "reset":
            reset_database(database)
        else:
            print(f"Unknown command: {command_name}")
    finally:
        database.dispose()


if __name__ == "__main__":
    main()
