"""Core contracts.

Protocols implemented by concrete adapters, so services depend on
abstractions and tests can pass stubs.
"""
