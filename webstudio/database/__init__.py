"""
The `database` package is responsible for all interactions with the site's
relational database.

Contents:
    - config:
        Settings, engine, shared metadata, declarative base and logging setup.

    - entities:
        SQLAlchemy entity models for users, quotes, projects, reviews,
        payment codes, payments, subscriptions, monthly reports and chat messages.

    - daos:
        Data Access Objects providing one method per read/write operation.

    - core:
        Service functions composing DAOs inside managed transactions.

    - helpers:
        Transaction management and integrity-error translation.

    - exceptions:
        Storage error taxonomy (constraint violations, redemption conflicts).
"""
