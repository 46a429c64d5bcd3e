"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain outcomes and
framework errors are consistently translated into problem details.
"""
