"""
LightBnB data access layer.
Lookup, filtered search and insertion for users, property listings and reservations.
"""

__version__ = "1.0.0"
