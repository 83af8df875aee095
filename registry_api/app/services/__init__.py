"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to
its store only through the ``MemoryStore`` interface, so API handlers
never touch the collection directly.
"""
