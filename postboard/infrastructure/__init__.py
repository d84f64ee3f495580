"""
Infrastructure layer package.

Contains adapters that implement domain ports: SQLAlchemy repositories
and password/token security adapters.
"""
