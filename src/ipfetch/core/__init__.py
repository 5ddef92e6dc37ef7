"""Core: domain models, contracts and the fetch/dispatch services.

The core knows nothing about the terminal; printing goes through an `emit`
callable supplied by the caller.
"""
