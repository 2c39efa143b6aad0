"""Healthcare infrastructure: SQLAlchemy models and repositories."""
