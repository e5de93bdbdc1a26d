"""Exceptions raised by the chain model.

Every error here is a caller contract violation, raised synchronously by the
operation that detected it. None of them is worth retrying.
"""

from __future__ import annotations


class MarkovError(Exception):
    """Base class for markov_text errors."""


class UsageError(MarkovError):
    """Operation used out of order, e.g. sampling before the model is built."""


class EmptyModelError(UsageError):
    """The built model has no transitions to sample from."""
