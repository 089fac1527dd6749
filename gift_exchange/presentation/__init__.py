"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and the error-to-status mapping
"""
