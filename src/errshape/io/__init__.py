"""Shared file I/O helpers."""

from .json_io import dump_json, load_error_document, write_json_atomic

__all__ = ["dump_json", "load_error_document", "write_json_atomic"]
