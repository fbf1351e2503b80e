from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from shopbudget.core.config import settings
import os

db_url = settings.SHOPPING_DATABASE_URL

# Hosted Postgres URLs: change postgres:// to postgresql:// (SQLAlchemy requirement)
if db_url.startswith("postgres://"):
    db_url = db_url.replace("postgres://", "postgresql://", 1)

if db_url.startswith("sqlite"):
    if "./" in db_url:
        # Resolve relative paths against backend/
        base_dir = os.path.dirname(os.path.abspath(__file__))
        backend_dir = os.path.dirname(base_dir)
        db_file = db_url.replace("sqlite:///./", "")
        db_url = f"sqlite:///{os.path.join(backend_dir, db_file)}"

    engine = create_engine(db_url, connect_args={"check_same_thread": False})
else:
    engine = create_engine(db_url, pool_pre_ping=True)


def enable_sqlite_foreign_keys(target_engine):
    """SQLite ignores ON DELETE CASCADE unless the pragma is set per connection."""
    if target_engine.dialect.name != "sqlite":
        return

    @event.listens_for(target_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
