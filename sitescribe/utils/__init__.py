"""Filesystem, manifest and URL helpers."""
