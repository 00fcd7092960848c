"""HTTP API layer built on FastAPI.

Key components:
- **main**: Application factory and lifecycle management
- **routes**: Planet lookup, pages and probe endpoints
- **middleware**: Request logging and exception handlers
- **schemas**: Pydantic models for requests and responses
- **utils**: orjson-based response class
"""
