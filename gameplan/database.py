from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from config.config import get_config
from gameplan.models.base import Base

DATABASE_URL = get_config().DATABASE_URL


def _connect_args(url):
    # SQLite connections are shared between the session factory's threads
    return {'check_same_thread': False} if url.startswith('sqlite') else {}


engine = create_engine(DATABASE_URL, connect_args=_connect_args(DATABASE_URL))

# Loaded rows stay readable after their session closes
SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False, bind=engine)


def init_db():
    """Create every scheduling table"""
    import gameplan.models  # noqa: F401  registers every model on Base
    Base.metadata.create_all(bind=engine)


def drop_db():
    """Drop every scheduling table"""
    Base.metadata.drop_all(bind=engine)


@contextmanager
def get_db():
    """Provide a transactional scope for database operations"""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


class DatabaseManager:
    """Generic record helper used by seeding, lookups and tests"""

    def __init__(self, model_class):
        self.model_class = model_class

    def _matching(self, db, criteria):
        query = db.query(self.model_class)
        for column, value in criteria.items():
            query = query.filter(getattr(self.model_class, column) == value)
        return query

    def create(self, **fields):
        """Insert one record and return it with its generated id"""
        with get_db() as db:
            record = self.model_class(**fields)
            db.add(record)
            db.flush()
            db.refresh(record)
            return record

    def get(self, record_id):
        with get_db() as db:
            return db.get(self.model_class, record_id)

    def filter(self, **criteria):
        with get_db() as db:
            return self._matching(db, criteria).all()

    def count(self, **criteria):
        with get_db() as db:
            return self._matching(db, criteria).count()
