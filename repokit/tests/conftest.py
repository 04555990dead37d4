"""Pytest configuration and fixtures."""

import pytest
from unittest.mock import Mock

from repokit.filters.customer_filter import CustomerFilter
from repokit.models.domain import CityCustomer
from repokit.repositories.customer_repository import InMemoryCustomerRepository
from repokit.repositories.memory_repository import InMemoryRepository
from repokit.services.customer_service import CustomerService
from repokit.utils.logger import NullLogger


@pytest.fixture
def null_logger():
    """Logger that discards everything."""
    return NullLogger()


@pytest.fixture
def mock_logger():
    """Logger double for asserting on emitted messages."""
    return Mock(spec=["info", "warn", "error"])


@pytest.fixture
def string_repo(null_logger):
    """Empty repository of strings keyed by int."""
    return InMemoryRepository(null_logger)


@pytest.fixture
def city_repo(null_logger):
    """Repository seeded with three Montreal and three Quebec customers."""
    repo = InMemoryRepository(null_logger)
    names = ["one", "two", "three", "four", "five", "six"]
    for i, name in enumerate(names, start=1):
        city = "Montreal" if i % 2 else "Quebec"
        repo.save(i, CityCustomer(id=i, name=f"Name {name}", city=city))
    return repo


@pytest.fixture
def montreal_spec():
    """Filter matching every customer in Montreal."""
    return CustomerFilter(CityCustomer(id=7, name="", city="Montreal"))


@pytest.fixture
def customer_repo(null_logger):
    """Empty thread-safe customer repository."""
    return InMemoryCustomerRepository(null_logger)


@pytest.fixture
def customer_service(customer_repo, null_logger):
    """Customer service with John Doe already registered."""
    service = CustomerService(customer_repo, null_logger)
    service.register_customer("1234-4321", "John Doe", "johndoe@email.com")
    return service
