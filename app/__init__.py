"""
Identity Gateway — HTTP façade over a managed identity provider.

Application package root. This is a small service using hexagonal
architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - identity: Registration, verification, sign-in, password recovery.

Layers:
    - domain: Validation, error normalization, outcome types, ports (ABCs).
    - application: The identity gateway and its DTOs.
    - infrastructure: The Cognito adapter implementing the provider port.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (envelopes, errors, security, logging).
"""
