"""SQLAlchemy declarative base shared by all table mappings."""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
