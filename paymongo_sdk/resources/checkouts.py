"""
Checkout Sessions API
"""

from paymongo_sdk.models import Checkout

from .base import Resource, Result, one


class CheckoutClient(Resource):
    """Create, retrieve and expire checkout sessions"""

    def create_checkout(self, checkout: Checkout) -> Result[Checkout]:
        """
        Create a checkout session

        Args:
            checkout: Session with line items and payment method types

        Returns:
            Created session, ``status`` ``active`` and ``checkout_url`` set

        Example:
            >>> session = client.checkouts.create_checkout(
            ...     Checkout(
            ...         description="Order #1001",
            ...         line_items=[LineItem(name="Mug", quantity=1, amount=35000)],
            ...         payment_method_types=[PaymentMethodType.GCASH],
            ...     )
            ... )
        """
        return self.http.request(
            "POST",
            "/checkout_sessions",
            body=checkout.to_payload(),
            parse=one(Checkout),
            endpoint="create_checkout",
        )

    def retrieve_checkout(self, checkout_id: str) -> Result[Checkout]:
        return self.http.request(
            "GET",
            f"/checkout_sessions/{checkout_id}",
            parse=one(Checkout),
            endpoint="retrieve_checkout",
        )

    def expire_checkout(self, checkout_id: str) -> Result[Checkout]:
        """
        Expire an active checkout session

        Args:
            checkout_id: Checkout session ID

        Returns:
            Session with ``status`` ``expired``
        """
        return self.http.request(
            "POST",
            f"/checkout_sessions/{checkout_id}/expire",
            parse=one(Checkout),
            endpoint="expire_checkout",
        )
