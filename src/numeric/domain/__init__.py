"""
Domain value objects.

Contains the two composite representations returned by every binary
operation: Cartesian and Polar.
"""

from src.numeric.domain.cartesian import Cartesian
from src.numeric.domain.polar import Polar

__all__ = [
    "Cartesian",
    "Polar",
]
