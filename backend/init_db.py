from sqlalchemy.engine import Engine
from database import engine as default_engine, Base
import models  # noqa: F401  registers tables and trigger DDL on Base.metadata
import logging

logger = logging.getLogger(__name__)


def init_database(engine: Engine | None = None):
    """
    Create missing tables together with their guard triggers.

    Existing tables are left untouched; the trigger DDL runs only when its
    table is created.

    Args:
        engine: Engine to initialise (defaults to the application engine)
    """
    engine = engine or default_engine
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database initialized: {engine.url.render_as_string(hide_password=True)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
