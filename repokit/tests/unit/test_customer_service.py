"""Unit tests for CustomerService."""

import pytest
from unittest.mock import Mock
from pydantic import ValidationError

from repokit.exceptions import (
    CustomerNotFoundError,
    DuplicateCustomerError,
    EntityNotFoundError,
)
from repokit.models.domain import Customer
from repokit.services.customer_service import CustomerService


class TestCustomerService:
    """Test CustomerService business logic."""

    def test_register_customer_with_valid_data(self, customer_service):
        """Test the registered customer fields."""
        customer = customer_service.get_customer("1234-4321")
        assert customer.id == "1234-4321"
        assert customer.name == "John Doe"
        assert customer.email == "johndoe@email.com"

    def test_register_customer_with_invalid_email(self, customer_service):
        """Test that a malformed email is rejected before storage."""
        with pytest.raises(ValueError):
            customer_service.register_customer("1223-4321", "John Doe", "johndoe.com")
        assert len(customer_service.list_customers()) == 1

    def test_invalid_customer_never_reaches_repository(self):
        """Test that validation happens before any repository call."""
        mock_repo = Mock()
        service = CustomerService(mock_repo, Mock())

        with pytest.raises(ValidationError):
            service.register_customer("1223-4321", "John Doe", "johndoe.com")
        mock_repo.save.assert_not_called()

    def test_register_duplicate_id_raises(self, customer_service):
        """Test that the repository's duplicate error propagates."""
        with pytest.raises(DuplicateCustomerError):
            customer_service.register_customer("1234-4321", "John Doe", "johndoe@email.com")

    def test_get_customer(self, customer_service):
        """Test retrieving a registered customer."""
        customer = customer_service.get_customer("1234-4321")
        assert customer.name == "John Doe"
        assert customer.email == "johndoe@email.com"

    def test_get_nonexistent_customer_raises(self, customer_service):
        """Test the domain-specific not-found error."""
        with pytest.raises(CustomerNotFoundError) as exc_info:
            customer_service.get_customer("Not-Existing")
        assert not isinstance(exc_info.value, EntityNotFoundError)

    def test_list_customers(self, customer_service):
        """Test listing all customers."""
        customer_service.register_customer("1234-4322", "John Doe", "johndoe@email.com")
        assert len(customer_service.list_customers()) == 2

    def test_remove_customer(self, customer_service):
        """Test removing a customer."""
        customer_service.remove_customer("1234-4321")
        with pytest.raises(CustomerNotFoundError):
            customer_service.get_customer("1234-4321")

    def test_remove_nonexistent_customer_raises(self, customer_service):
        """Test removing a customer that is not registered."""
        with pytest.raises(CustomerNotFoundError):
            customer_service.remove_customer("Not-Existing")

    def test_register_delegates_to_repository(self):
        """Test that registration saves the built customer."""
        mock_repo = Mock()
        mock_logger = Mock()
        service = CustomerService(mock_repo, mock_logger)

        customer = service.register_customer("1", "Alice", "alice@test.com")

        mock_repo.save.assert_called_once_with(customer)
        mock_logger.info.assert_called_once_with("Registered new customer with ID: 1")

    def test_get_customer_miss_logs_warning(self):
        """Test that a miss is reported on the logger."""
        mock_repo = Mock()
        mock_repo.find_by_id.return_value = None
        mock_logger = Mock()
        service = CustomerService(mock_repo, mock_logger)

        with pytest.raises(CustomerNotFoundError):
            service.get_customer("x")
        mock_logger.warn.assert_called_once()

    def test_requires_repository_and_logger(self, customer_repo, null_logger):
        """Test constructor argument checks."""
        with pytest.raises(ValueError):
            CustomerService(None, null_logger)
        with pytest.raises(ValueError):
            CustomerService(customer_repo, None)


class TestCustomer:
    """Test Customer validation."""

    def test_valid_customer(self):
        """Test constructing a valid customer."""
        customer = Customer(id="1", name="Alice", email="alice@test.com")
        assert customer.name == "Alice"

    @pytest.mark.parametrize("email", ["invalid-email", "johndoe.com", "a@", "@b.com", "a b@c.com"])
    def test_invalid_email(self, email):
        """Test malformed email addresses."""
        with pytest.raises(ValueError):
            Customer(id="2", name="Bob", email=email)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, name):
        """Test that blank names are rejected."""
        with pytest.raises(ValueError, match="name cannot be blank"):
            Customer(id="3", name=name, email="valid@test.com")

    def test_blank_id(self):
        """Test that a blank id is rejected."""
        with pytest.raises(ValueError, match="id cannot be blank"):
            Customer(id=" ", name="Alice", email="alice@test.com")

    def test_none_id(self):
        """Test that a None id is rejected."""
        with pytest.raises(ValueError):
            Customer(id=None, name="Alice", email="alice@test.com")

    def test_none_email(self):
        """Test that a None email is rejected."""
        with pytest.raises(ValueError):
            Customer(id="4", name="Alice", email=None)

    def test_customer_is_immutable(self):
        """Test that fields cannot be reassigned."""
        customer = Customer(id="1", name="Alice", email="alice@test.com")
        with pytest.raises(ValidationError):
            customer.name = "Bob"
