"""Pydantic schema models for API request/response validation.

- **planets**: Body of the planet lookup
- **system**: Host information and probe responses
"""
