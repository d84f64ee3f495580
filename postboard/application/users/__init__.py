"""Use cases for accounts, sessions and user profiles."""
