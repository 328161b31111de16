"""Infrastructure: persistence (SQLAlchemy) and security (JWT)."""
