"""HTTP API (FastAPI routers and dependencies)."""
