"""
Generic numeric abstraction layer.

Contains the numeric capabilities (Real, Number), the scalar bindings and
the two composite representations (Cartesian, Polar).
"""
