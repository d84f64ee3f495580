"""Use cases for reading and writing posts."""
