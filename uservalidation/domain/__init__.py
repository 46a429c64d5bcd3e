"""
Domain layer package.

Contains pure business logic: entities, constraint declarations,
the validation executor and port interfaces. No framework imports,
no IO, no side effects.
"""
