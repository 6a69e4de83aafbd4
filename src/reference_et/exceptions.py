"""
Custom exceptions for reference evapotranspiration calculations.

Provides a small exception hierarchy so callers can tell missing data,
invalid input and numerically undefined results apart.
"""

from typing import Any, Dict, List, Optional


class ReferenceETError(ValueError):
    """
    Base exception for reference ET errors.

    All custom exceptions inherit from this class. Every error is terminal
    for the evaluation that raised it.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, *args):
        super().__init__(message, *args)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def add_detail(self, key: str, value: Any) -> None:
        """
        Add detail information to the exception.

        Args:
            key: Detail key
            value: Detail value
        """
        self.details[key] = value


class MissingRequiredFieldError(ReferenceETError):
    """
    Exception raised when a calculation needs a field that was not supplied.

    Examples:
    - MaxMinRelativeHumidity without both RH extremes
    - Wind adjustment without a wind speed
    """

    def __init__(self, field_name: str, method: Optional[str] = None, *args):
        details = {"field": field_name}
        if method:
            details["method"] = method
            message = f"Missing required field '{field_name}' for {method}"
        else:
            message = f"Missing required field '{field_name}'"
        super().__init__(message, details, *args)
        self.field_name = field_name
        self.method = method


class InvalidInputError(ReferenceETError):
    """
    Exception raised when observation values fail validation.

    All violations found are collected in ``errors``.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None, *args):
        details = {"errors": errors} if errors else None
        super().__init__(message, details, *args)
        self.errors = errors or []


class DomainMathError(ReferenceETError):
    """
    Exception raised when an intermediate quantity is numerically undefined.

    This includes logarithms of non-positive arguments, square roots of
    negative values and acos arguments outside [-1, 1].
    """

    def __init__(
        self,
        message: str,
        quantity: Optional[str] = None,
        value: Optional[float] = None,
        *args
    ):
        details: Dict[str, Any] = {}
        if quantity:
            details["quantity"] = quantity
        if value is not None:
            details["value"] = value
        super().__init__(message, details, *args)
        self.quantity = quantity
        self.value = value
