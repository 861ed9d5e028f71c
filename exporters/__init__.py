"""Exporters for writing bundled context to disk."""

from .context_exporter import ContextWriter

__all__ = ["ContextWriter"]
