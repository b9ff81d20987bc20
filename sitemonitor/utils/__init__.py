"""Utility functions for the site monitor."""

from .urls import default_scheme, is_blank, is_digits, is_well_formed_url

__all__ = [
    "default_scheme",
    "is_blank",
    "is_digits",
    "is_well_formed_url",
]
