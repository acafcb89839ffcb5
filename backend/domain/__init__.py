"""
Domain Layer

This package contains the core business domain logic, separated from
persistence concerns and infrastructure.

Structure:
- entities/: Business entities validated at construction
- value_objects/: Immutable value types without identity
"""
