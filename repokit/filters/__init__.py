"""Specification-based filtering."""

from .specification import (
    Specification,
    AndSpecification,
    OrSpecification,
    NotSpecification,
    PredicateSpecification,
)
from .customer_filter import CustomerFilter

__all__ = [
    "Specification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "PredicateSpecification",
    "CustomerFilter",
]
