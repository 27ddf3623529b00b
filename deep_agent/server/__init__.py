"""HTTP surface of the deep agent: FastAPI application, routes and wiring."""
