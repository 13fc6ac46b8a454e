"""Reusable libraries bundled with mmhelp."""
