"""
Service layer abstraction.

Business logic lives here rather than in the API handlers.  Handlers
receive a repository through FastAPI dependency injection, so the
SQLite implementation can be swapped for a test double without
touching handler code.
"""
