"""
Cloudphone Plugin Observability Package.

Provides:
- Structured logging (structlog)
"""

__all__ = ["logging"]
