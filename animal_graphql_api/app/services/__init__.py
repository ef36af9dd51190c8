"""
Service layer abstraction.

The animal store encapsulates all record handling.  It is an
explicitly owned object: the application factory creates one and
hands it to the GraphQL layer through the request context.
"""
