#!/usr/bin/env python3
"""
Migration script for the Todo table.
Creates the table when missing and adds columns that older schemas lack.
"""

import sys
from pathlib import Path

from sqlalchemy import inspect, text

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from app.database import init_db, Base, engine

COLUMNS_TO_ADD = {
    "isCompleted": "BOOLEAN NOT NULL DEFAULT 0",
}


def migrate():
    print("Initializing database with all models...")
    init_db()
    print("✓ Database initialized successfully")

    from app.models import Todo

    table = Todo.__tablename__
    if table not in Base.metadata.tables:
        print(f"✗ {table} table not registered")
        return False

    inspector = inspect(engine)
    existing = {c["name"] for c in inspector.get_columns(table)}

    added = []
    for col, col_type in COLUMNS_TO_ADD.items():
        if col in existing:
            continue
        ddl = f'ALTER TABLE "{table}" ADD COLUMN "{col}" {col_type}'
        if engine.dialect.name == "mysql":
            ddl = f"ALTER TABLE `{table}` ADD COLUMN `{col}` {col_type}"
        try:
            with engine.begin() as conn:
                conn.execute(text(ddl))
            added.append(col)
        except Exception as e:
            print(f"✗ Failed to add column {col}: {e}")
            return False

    if added:
        print(f"✓ Added {table} columns: {', '.join(added)}")
    else:
        print(f"✓ {table} columns already up to date")

    return True

if __name__ == "__main__":
    success = migrate()
    sys.exit(0 if success else 1)
