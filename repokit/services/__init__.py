"""
Service layer for business logic.

Services orchestrate validation and repository calls and translate
storage results into domain errors.
"""

from .customer_service import CustomerService

__all__ = ["CustomerService"]
