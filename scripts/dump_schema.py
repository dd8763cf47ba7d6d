# scripts/dump_schema.py
#  to run the script, run the following command:
#  python scripts/dump_schema.py --dialect mysql

"""
Schema Dump Script
Prints the CREATE TABLE / CREATE INDEX statements for a SQL dialect
"""
import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.schema import CreateIndex, CreateTable

import app.model_registry  # noqa: F401
from app.database.connection import Base

DIALECTS = {
    "sqlite": sqlite.dialect,
    "mysql": mysql.dialect,
    "postgresql": postgresql.dialect,
}


def render_ddl(dialect_name: str = "sqlite") -> str:
    """Return the full DDL for every table, parents before children."""
    dialect = DIALECTS[dialect_name]()
    statements = []
    for table in Base.metadata.sorted_tables:
        statements.append(str(CreateTable(table).compile(dialect=dialect)).strip() + ";")
        for index in sorted(table.indexes, key=lambda ix: str(ix.name)):
            statements.append(str(CreateIndex(index).compile(dialect=dialect)).strip() + ";")
    return "\n\n".join(statements) + "\n"


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print the clinic booking DDL.")
    parser.add_argument("--dialect", choices=sorted(DIALECTS), default="sqlite")
    args = parser.parse_args()
    sys.stdout.write(render_ddl(args.dialect))
