"""Infrastructure layer for external systems.

Key responsibilities:
- **Document store**: Async MongoDB client and read-only planet repository
- **Assets**: Landing page and API descriptor files read from disk
"""
