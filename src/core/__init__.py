"""Core package for shared application functionality.

- **config**: Centralized configuration management with environment support
- **exceptions**: Exception hierarchy with error codes and severities
- **logging**: Loguru setup with console and JSON formatters
"""
