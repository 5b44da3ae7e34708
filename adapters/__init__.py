"""
Adapters package - External service connections.
"""

from adapters.media_adapter import CloudinaryUploader

__all__ = ["CloudinaryUploader"]
