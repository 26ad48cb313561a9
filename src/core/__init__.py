"""
Core domain models, mathematical primitives, and invariants.

Arbitrary-precision decimal integer arithmetic with no external state.
"""
