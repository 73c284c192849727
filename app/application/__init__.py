"""
Application layer package.

Contains the identity gateway, which orchestrates validation, one
provider call and error normalization per use case.
This layer depends on domain ports, never on infrastructure.
"""
