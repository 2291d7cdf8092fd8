"""HTTP API: FastAPI application, dependencies and middleware."""
