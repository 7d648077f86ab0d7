"""
Application layer for the tokenization bounded context.

Use cases coordinate domain entities and ports to list, open, accept and
reject transfer proposals. No framework or infrastructure imports allowed.
"""
