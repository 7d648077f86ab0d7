"""
Shared error handling package.

Registers the exception handlers that turn domain errors into the
tokenization response envelopes.
"""
