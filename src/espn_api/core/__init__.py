"""Core layer: configuration, error taxonomy, domain records and contracts.

Nothing here performs I/O.
"""
