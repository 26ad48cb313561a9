"""
Domain models and value objects.

Contains the BigInt entity (sign-magnitude arbitrary-precision integer).
"""

from src.core.domain.big_int import BigInt, parse_big_int

__all__ = [
    "BigInt",
    "parse_big_int",
]
