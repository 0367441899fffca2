"""
Core domain models, mathematical primitives, and contracts.

Foundational building blocks of the calculator: error codes, the outcome
type, calculation records, epsilon predicates and JSON Schema validators.
"""
