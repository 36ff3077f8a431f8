"""
The `config` package provides the building blocks for establishing database connections.

Contents:
    - config: strongly typed settings loaded from environment variables (with .env support), exposed through a singleton Settings object
    - connection_engine: SQLAlchemy bootstrap that builds the connection URL, creates the Engine, the shared MetaData (with constraint naming convention) and the declarative base
    - logger: attaches a stream handler to the package logger at the configured level
"""
