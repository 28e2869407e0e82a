"""
Title normalization utilities.

These modules canonicalize source titles (case, release qualifiers, length)
so that spellings from different sources can be compared.
"""

from .titles import (
    MAX_TITLE_LENGTH,
    TITLE_VARIANT_KEYS,
    Title,
    normalize_title,
    normalize_title_variants,
    primary_title,
    title_variants,
)

__all__ = [
    'MAX_TITLE_LENGTH',
    'TITLE_VARIANT_KEYS',
    'Title',
    'normalize_title',
    'normalize_title_variants',
    'primary_title',
    'title_variants',
]
