"""
Structured Name Package

A Name is an ordered sequence of string components joined by a
single-character delimiter.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Name resolution
    - Storage
    - Display formatting beyond the two string renderings

Components are always stored in MASKED form.
The masking codec is the only place that knows about escaping.
"""

__version__ = "0.1.0"
