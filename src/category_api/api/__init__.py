"""HTTP API: FastAPI app, routes, dependency wiring and error handlers."""
