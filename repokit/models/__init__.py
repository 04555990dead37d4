"""Value types and domain entities."""

from .containers import Container, Pair
from .domain import Customer, CityCustomer

__all__ = ["Container", "Pair", "Customer", "CityCustomer"]
