"""
Persistence adapters.

Services depend on the repository interface (find by id, find by filter,
upsert, delete) rather than touching SQLAlchemy sessions directly.
"""
