"""
Domain layer package.

Contains pure business logic: ledger records, proposal views, the
proposal transformer and port interfaces. No framework imports,
no IO, no side effects.
"""
