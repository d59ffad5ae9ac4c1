"""Geocoin Carrier: grid-cell caches and coin custody on a geographic map."""

__version__ = "0.1.0"
