"""
High-level use cases for the sup API.

Each service module orchestrates the repository and the security helpers to
implement one part of the request pipeline (authenticate, validate,
authorize, check references, persist).

Routers (FastAPI endpoints) call these services instead of manipulating the
database directly.
"""
