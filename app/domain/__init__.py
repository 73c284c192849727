"""
Domain layer package.

Contains the rules of the identity context: registration validation,
provider error normalization, outcome types and the provider port.
No framework imports, no IO, no side effects.
"""
