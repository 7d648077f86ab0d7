"""
Infrastructure adapters for the tokenization bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system: the DAML HTTP JSON API or an in-process store.
"""
