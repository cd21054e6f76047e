"""Standalone helpers."""

from .namespace import extract_namespace

__all__ = ["extract_namespace"]
