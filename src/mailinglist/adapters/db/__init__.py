"""SQLAlchemy engine, metadata, dialect and column-type helpers."""
