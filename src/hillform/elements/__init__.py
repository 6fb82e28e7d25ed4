"""
Elements subpackage - isotope records and the periodic table registry.

The default registry requires RDKit.
"""

from hillform.elements.isotope import (
    Element,
    Isotope,
    isotope_key,
    split_isotope_key,
)

from hillform.elements.periodic_table import (
    PeriodicTable,
    default_table,
)

__all__ = [
    # isotope
    "Element",
    "Isotope",
    "isotope_key",
    "split_isotope_key",
    # periodic_table
    "PeriodicTable",
    "default_table",
]
