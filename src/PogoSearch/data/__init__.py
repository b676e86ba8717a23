"""Bundled catalog and default configuration."""
