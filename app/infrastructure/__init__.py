"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports defined in the
domain layer: the DAML HTTP JSON API client and in-process stores.
"""
