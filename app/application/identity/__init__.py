"""
Application layer for the identity bounded context.

The gateway coordinates validation, the provider port and error
normalization. No framework or infrastructure imports allowed.
"""
