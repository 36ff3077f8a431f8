"""
Data layer of the studio website: schema, data access objects and form validation.
"""

__version__ = "0.1.0"
