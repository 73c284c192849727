"""
Infrastructure adapters for the identity bounded context.

Each adapter implements a domain port (ABC) and connects
to the managed identity provider.
"""
