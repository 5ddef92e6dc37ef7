"""Domain models and errors.

The domain holds plain, strict data structures (Pydantic v2) and the error
hierarchy. It does not know about HTTP, HTML parsers or the CLI.
"""
