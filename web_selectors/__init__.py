"""
Selectors package for building CSS selector strings.

This package provides an immutable selector builder, the four CSS combinators
and a facade that starts a new builder for every chain.
"""

from .builder import (
    COMBINATORS,
    CombinedSelectorError,
    DuplicatePartError,
    InvalidCombinatorError,
    PartOrderError,
    SelectorBuilder,
    SelectorBuilderError,
)
from .facade import CssSelectorBuilder, css_selector_builder

__version__ = "0.1.0"
__author__ = "Bhavana Kedari"

# Export main classes
__all__ = [
    "COMBINATORS",
    "CombinedSelectorError",
    "CssSelectorBuilder",
    "DuplicatePartError",
    "InvalidCombinatorError",
    "PartOrderError",
    "SelectorBuilder",
    "SelectorBuilderError",
    "css_selector_builder",
]
