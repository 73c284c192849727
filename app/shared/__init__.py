"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Response envelopes
- Error handling and mapping
- Security middleware
- Rate limiting
- Logging configuration
"""
