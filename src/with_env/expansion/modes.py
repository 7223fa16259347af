"""Substitution modes for reference expansion."""

import enum


class SubstitutionMode(enum.StrEnum):
    """How many occurrences of a reference are replaced in one string."""

    ALL = "all"  # every occurrence
    FIRST = "first"  # first occurrence of each (name, form) pair only
