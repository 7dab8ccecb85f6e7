"""
Payments API
"""

from typing import List, Optional

from paymongo_sdk.models import Payment

from .base import Resource, Result, many, one


class PaymentClient(Resource):
    """Payments API"""

    def create_payment(self, payment: Payment) -> Result[Payment]:
        """
        Create a payment from a chargeable source

        Args:
            payment: Payment with amount, currency and ``source``
                (see :meth:`Payment.for_source`)

        Returns:
            Created payment
        """
        return self.http.request(
            "POST",
            "/payments",
            body=payment.to_payload(),
            parse=one(Payment),
            endpoint="create_payment",
        )

    def retrieve_payment(self, payment_id: str) -> Result[Payment]:
        return self.http.request(
            "GET",
            f"/payments/{payment_id}",
            parse=one(Payment),
            endpoint="retrieve_payment",
        )

    def list_payments(
        self,
        limit: Optional[int] = None,
        before: Optional[str] = None,
        after: Optional[str] = None,
    ) -> Result[List[Payment]]:
        """
        List payments, newest first

        Args:
            limit: Page size
            before: Return payments before this payment ID
            after: Return payments after this payment ID

        Returns:
            One page of payments
        """
        return self.http.request(
            "GET",
            "/payments",
            params={"limit": limit, "before": before, "after": after},
            parse=many(Payment),
            endpoint="list_payments",
        )
