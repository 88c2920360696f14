# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class InvalidArgumentError(ValueError):
    """Raised when an absent item (or batch) is handed to a container."""


class StateValidationError(ValueError):
    """Raised when an item or container is constructed with invalid values."""
