"""
API layer - FastAPI routers, dependencies and middleware.
"""
