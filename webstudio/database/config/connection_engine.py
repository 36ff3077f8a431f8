"""
Connection Engine (SQLAlchemy)

Purpose
-------
Centralizes database initialization for the data layer:
- Builds the SQLAlchemy connection URL from environment-backed settings.
- Creates the Engine (connection pool + SQL execution entry point).
- Defines shared MetaData with a constraint naming convention, so unique,
  foreign-key and check violations can be traced back to a named constraint.
- Exposes a Declarative Base class for ORM models.

Notes
-----
- All ORM models must inherit from `declarativeBase` to share the metadata.
- Pool behaviour (`pool_pre_ping`) and SQL echo are driven by settings.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import URL
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import MetaData
from webstudio.database.config.config import settings

connection_url = URL.create(
    drivername=settings.DB_DRIVER_NAME,
    username=settings.DB_USERNAME,
    password=settings.DB_PASSWORD,
    host=settings.DB_HOST,
    port=settings.DB_PORT,
    database=settings.DB_DATABASE_NAME,
)
"""SQLAlchemy connection URL assembled from Settings."""

connection_engine = create_engine(
    connection_url,
    echo=settings.DB_ECHO,
    pool_pre_ping=settings.DB_POOL_PRE_PING,
)
"""Engine object: core interface to the database (connections, pooling, SQL execution)."""

naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}
"""Constraint names reported back by the database on violations."""

metadata = MetaData(naming_convention=naming_convention)
"""Schema-level information about tables, constraints and indexes, shared across all models."""

declarativeBase = declarative_base(metadata=metadata)
"""Declarative Base: root class for ORM models."""
