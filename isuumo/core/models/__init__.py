"""
Domain and I/O models.

- domain/: search condition documents and map geometry
- io/: Pydantic request/response schemas for the HTTP API
"""
