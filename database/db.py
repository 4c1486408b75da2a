from sqlalchemy import create_engine, event                 # engine factory
from sqlalchemy.orm import declarative_base, sessionmaker   # Base class / session factory

from config.settings import settings                       # ✅ environment settings

_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

# ✅ engine built from the configured DB URL
engine = create_engine(settings.DATABASE_URL, connect_args=_connect_args)


# SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
@event.listens_for(engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if settings.DATABASE_URL.startswith("sqlite"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ✅ session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ declarative Base shared by every model
Base = declarative_base()


# ==========================================================
# [Common] DB session per request
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
