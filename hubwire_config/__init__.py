"""
hubwire Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from hubwire_config.settings import Settings

__all__ = ["Settings"]
