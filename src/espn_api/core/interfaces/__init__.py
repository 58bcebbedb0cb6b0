"""Interfaces of the core.

Contracts (Protocol) implemented by concrete adapters so accessors depend on
an abstraction rather than on the façade class.
"""
