"""Per-run state and records for context bundles."""

from .model import BundleRecord, BundleRun, VisitedSet

__all__ = ["BundleRecord", "BundleRun", "VisitedSet"]
