"""Resolver functions for the GraphQL schema.

Types, queries and mutations stay thin and call into the sibling modules,
which talk to the document collections on the request context.
"""
