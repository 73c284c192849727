"""
Identity bounded context — domain layer.

This module contains all domain logic for the identity context:
- Registration input validation
- Provider error normalization
- Outcome (Result) types shared by every layer
- The identity provider port
"""
