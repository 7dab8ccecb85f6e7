"""
Refunds API
"""

from typing import List, Optional

from paymongo_sdk.models import Refund

from .base import Resource, Result, many, one


class RefundClient(Resource):
    """Refunds API"""

    def create_refund(self, refund: Refund) -> Result[Refund]:
        """
        Refund a payment, fully or partially

        Args:
            refund: Refund with ``payment_id``, ``amount`` and ``reason``

        Returns:
            Created refund, usually ``pending``
        """
        return self.http.request(
            "POST",
            "/refunds",
            body=refund.to_payload(),
            parse=one(Refund),
            endpoint="create_refund",
        )

    def retrieve_refund(self, refund_id: str) -> Result[Refund]:
        return self.http.request(
            "GET",
            f"/refunds/{refund_id}",
            parse=one(Refund),
            endpoint="retrieve_refund",
        )

    def list_refunds(
        self, payment_id: Optional[str] = None, limit: Optional[int] = None
    ) -> Result[List[Refund]]:
        """
        List refunds

        Args:
            payment_id: Only refunds of this payment
            limit: Page size
        """
        return self.http.request(
            "GET",
            "/refunds",
            params={"payment_id": payment_id, "limit": limit},
            parse=many(Refund),
            endpoint="list_refunds",
        )
