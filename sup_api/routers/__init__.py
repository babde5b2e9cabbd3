"""
FastAPI routers grouped by resource.
"""
