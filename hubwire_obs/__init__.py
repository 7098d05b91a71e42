"""
hubwire Observability Package.

Provides structured logging (structlog).
"""

__all__ = ["logging"]
