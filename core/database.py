import logging
import re

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from core.config_loader import settings

logger = logging.getLogger("db")


class Base(DeclarativeBase):
    pass


safe_url = re.sub(r":([^:@/]+)@", ":***@", settings.DATABASE_URL)
logger.info("using DATABASE_URL = %s", safe_url)

_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=_connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
