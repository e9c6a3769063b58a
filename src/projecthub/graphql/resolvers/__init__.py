"""Resolver package for the GraphQL schema.

Query, mutation and field definitions delegate to the functions in the
sibling modules, which own the database sessions.
"""
