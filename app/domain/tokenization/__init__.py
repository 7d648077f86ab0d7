"""
Tokenization bounded context: domain layer.

This module contains all domain logic for token transfer proposals:
- Raw ledger contract records and the UI-facing proposal view
- Proposal transformation
- Legacy (off-ledger) proposal records
- Ports to the ledger and to the legacy proposal store
"""
