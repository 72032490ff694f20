"""Command implementations for the release-bump CLI."""
