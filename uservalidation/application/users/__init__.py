"""
Application layer for the users bounded context.

Use cases return explicit outcome values for expected failures
(validation, not found, conflict); the interface layer maps them.
"""
