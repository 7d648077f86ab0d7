"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas and the
response envelopes. No business logic belongs here.
Routes call use cases and return responses.
"""
