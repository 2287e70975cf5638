"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error handling and mapping
- Request validation rules
- Origin restriction
- Logging configuration
"""
