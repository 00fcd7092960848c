"""Solar System API - planet lookups over a document store.

Architecture Overview:
- **API Layer**: FastAPI routes, middleware and exception handlers
- **Core Layer**: Configuration, logging and the exception hierarchy
- **Infrastructure Layer**: MongoDB client, planet repository and files on disk
"""
