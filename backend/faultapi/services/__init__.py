"""Services Layer — orchestrates the core pipeline per request.

Invariants:
    - Services raise EmulatorError subclasses only; HTTP mapping stays in api/
"""
