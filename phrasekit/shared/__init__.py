# phrasekit/shared/__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by the core domain:
- Configuration management (pydantic-settings)
- Structured logging (structlog)
"""
