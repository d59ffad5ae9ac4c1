"""HTTP API: FastAPI app, session manager and route modules."""
