"""Generate database session"""

from functools import lru_cache
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings, load_settings
from src.db.schema import Base


@lru_cache
def session_factory(settings: Settings) -> sessionmaker[Session]:
    """One engine per configuration"""
    engine = create_engine(settings.database_url, echo=settings.db_echo)

    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine)


def get_db(settings: Optional[Settings] = None) -> Generator[Session, None, None]:
    SessionLocal = session_factory(settings or load_settings())
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
