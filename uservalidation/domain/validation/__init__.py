"""
Declarative field validation.

Constraints are plain data (see constraints.py); the executor walks a
constraint table and collects every violation it finds.
"""
