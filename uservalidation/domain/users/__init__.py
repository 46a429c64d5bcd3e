"""
Users bounded context — domain layer.

Holds the User entity, the create-user constraint table, the
repository port and the outcome values returned instead of raising.
"""
