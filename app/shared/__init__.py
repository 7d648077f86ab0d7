"""
Shared module package.

Contains cross-cutting concerns used by every router:
- Domain error to HTTP mapping
- Secure headers and rate limiting
- Logging configuration
"""
