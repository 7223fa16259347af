"""Expansion - substitute variable references."""

from .expander import VariableExpander
from .modes import SubstitutionMode

__all__ = ["SubstitutionMode", "VariableExpander"]
