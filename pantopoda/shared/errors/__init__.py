"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that validation and upstream
errors are consistently translated into API responses.
"""
