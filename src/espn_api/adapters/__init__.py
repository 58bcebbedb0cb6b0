"""Adapters: everything that touches I/O (HTTP, files)."""
