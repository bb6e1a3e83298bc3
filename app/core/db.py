from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import QueuePool

from app.core.config import settings


DATABASE_URL = settings.DATABASE_URL

# SQLite connections are shared across the request threadpool
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Create engine
engine = create_engine(
	DATABASE_URL,
	echo=False,
	poolclass=QueuePool,
	connect_args=connect_args,
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

# Base for models
Base = declarative_base()


def get_db() -> Generator:
	db = SessionLocal()
	try:
		yield db
	finally:
		db.close()


def init_db() -> None:
	"""Import models to ensure they are registered on the Base metadata, then create tables."""
	# Import model modules so they register with Base
	import app.models.user  # noqa: F401
	import app.models.activity  # noqa: F401
	import app.models.customer  # noqa: F401
	import app.models.provider  # noqa: F401
	import app.models.project  # noqa: F401
	import app.models.provider_eligibility  # noqa: F401

	Base.metadata.create_all(bind=engine)
