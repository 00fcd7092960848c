"""FastAPI middleware and exception handlers.

- **RequestLoggingMiddleware**: Request start/completion logs with timing
- **error_handler**: Maps exceptions to plain-text error responses
"""
