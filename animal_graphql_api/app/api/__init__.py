"""
API package.

GraphQL is the only transport exposed by this service; its schema,
types and router live in the ``graphql`` subpackage.
"""
