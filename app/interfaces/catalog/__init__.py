"""
Interfaces for the catalog bounded context.

FastAPI router, request validation rules, and response schemas.
"""
