"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that validation failures and
domain errors are consistently translated into API responses.
"""
