"""
Domain layer package.

Contains entities, port interfaces, the closed set of domain errors
and the guard functions that raise them.
No framework imports, no IO, no side effects.
"""
