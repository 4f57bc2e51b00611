"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "errshape"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: normalize nested validation errors for display"
