"""
Core utilities shared across the sup API.

This package hosts configuration, logging setup, password hashing and the
error hierarchy. Services and routers depend on these primitives instead of
reading os.environ or argon2 directly.
"""
