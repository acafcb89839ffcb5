from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from constants import TableNames, TriggerNames
import logging

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {
    TableNames.AUTHORS: ['id', 'name', 'birth_date'],
    TableNames.BOOKS: ['id', 'title', 'price', 'status'],
    TableNames.BOOK_AUTHORS: ['book_id', 'author_id'],
}

REQUIRED_TRIGGERS = [
    TriggerNames.BOOK_STATUS_GUARD,
    TriggerNames.AUTHOR_BIRTH_DATE_INSERT,
    TriggerNames.AUTHOR_BIRTH_DATE_UPDATE,
]


class SchemaValidator:
    @staticmethod
    def check(engine: Engine):
        """
        Check that the database schema has every table, column and guard
        trigger the application relies on.

        Returns:
            dict: {
                "valid": bool,
                "issues": list[str],
                "missing_tables": list[str],
                "missing_columns": list[str],
                "missing_triggers": list[str]
            }
        """
        inspector = inspect(engine)
        tables = inspector.get_table_names()

        issues = []
        missing_tables = []
        missing_columns = []
        missing_triggers = []

        for table, required in REQUIRED_COLUMNS.items():
            if table not in tables:
                missing_tables.append(table)
                issues.append(f"Missing '{table}' table")
                continue
            columns = [col['name'] for col in inspector.get_columns(table)]
            for column in required:
                if column not in columns:
                    missing_columns.append(f"{table}.{column}")
                    issues.append(f"Missing '{column}' column in '{table}' table")

        with engine.connect() as conn:
            existing_triggers = set(conn.execute(
                text("SELECT name FROM sqlite_master WHERE type = 'trigger'")
            ).scalars().all())
        for trigger in REQUIRED_TRIGGERS:
            if trigger not in existing_triggers:
                missing_triggers.append(trigger)
                issues.append(f"Missing '{trigger}' trigger")

        valid = len(issues) == 0

        if not valid:
            logger.warning(f"Schema validation failed: {issues}")
        else:
            logger.info("Database schema validation passed")

        return {
            "valid": valid,
            "issues": issues,
            "missing_tables": missing_tables,
            "missing_columns": missing_columns,
            "missing_triggers": missing_triggers
        }
