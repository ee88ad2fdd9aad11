"""Shared utilities."""

from .uuid import generate_uuid_v7

__all__ = [
    "generate_uuid_v7",
]
