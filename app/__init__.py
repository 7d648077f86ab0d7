"""
Canton Tokenization: transfer proposal service for a DAML ledger.

Application package root. This is a small service using hexagonal
architecture (ports & adapters) in front of the DAML HTTP JSON API.

Bounded contexts:
    - tokenization: Pending transfer proposals, acceptance and rejection.

Layers:
    - domain: Ledger records, proposal views, the transformer, ports, errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (DAML JSON API, legacy proposal store).
    - interfaces: FastAPI routers, Pydantic schemas, response envelopes.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
