"""
Core app - Shared API plumbing.

Provides:
- The error taxonomy raised by service layers (exceptions)
- The {success, data, error, count} response envelope and the exception
  handlers that produce it (responses)
"""
