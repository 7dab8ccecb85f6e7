"""
Customers API
"""

from typing import Optional

from paymongo_sdk.models import Customer

from .base import Resource, Result, accepted, first_or_none, one


class CustomerClient(Resource):
    """Customers API"""

    def create_customer(self, customer: Customer) -> Result[Customer]:
        return self.http.request(
            "POST",
            "/customers",
            body=customer.to_payload(),
            parse=one(Customer),
            endpoint="create_customer",
        )

    def retrieve_customer(self, customer_id: str) -> Result[Customer]:
        return self.http.request(
            "GET",
            f"/customers/{customer_id}",
            parse=one(Customer),
            endpoint="retrieve_customer",
        )

    def retrieve_customer_by_email(self, email: str) -> Result[Optional[Customer]]:
        """
        Look up a customer by email

        Returns:
            Matching customer, or None when there is none
        """
        return self.http.request(
            "GET",
            "/customers",
            params={"email": email},
            parse=first_or_none(Customer),
            endpoint="retrieve_customer_by_email",
        )

    def edit_customer(self, customer_id: str, customer: Customer) -> Result[Customer]:
        """
        Update a customer

        Only the fields set on ``customer`` are sent.

        Args:
            customer_id: Customer ID
            customer: Fields to change

        Returns:
            Updated customer
        """
        return self.http.request(
            "PATCH",
            f"/customers/{customer_id}",
            body=customer.to_payload(),
            parse=one(Customer),
            endpoint="edit_customer",
        )

    def delete_customer(self, customer_id: str) -> Result[bool]:
        """
        Delete a customer

        Returns:
            True once the API accepted the deletion
        """
        return self.http.request(
            "DELETE",
            f"/customers/{customer_id}",
            parse=accepted,
            endpoint="delete_customer",
        )
