"""Export utilities for run outputs."""

from .writers import export_all, export_null_distribution, export_summary
from .manifest import create_manifest, save_manifest, validate_manifest

__all__ = [
    "export_all",
    "export_null_distribution",
    "export_summary",
    "create_manifest",
    "save_manifest",
    "validate_manifest",
]
