"""
Payment Methods API
"""

from paymongo_sdk.models import PaymentMethod

from .base import Resource, Result, one


class PaymentMethodsClient(Resource):
    """Payment Methods API"""

    def create_payment_method(self, payment_method: PaymentMethod) -> Result[PaymentMethod]:
        """
        Create a payment method

        Uses the public key when one is configured. Card number and CVC are
        redacted from debug logs.

        Args:
            payment_method: Method type with details and billing

        Returns:
            Created payment method (card details reduced to ``last4``)
        """
        return self.http.request(
            "POST",
            "/payment_methods",
            body=payment_method.to_payload(),
            parse=one(PaymentMethod),
            use_public_key=True,
            endpoint="create_payment_method",
        )

    def retrieve_payment_method(self, payment_method_id: str) -> Result[PaymentMethod]:
        return self.http.request(
            "GET",
            f"/payment_methods/{payment_method_id}",
            parse=one(PaymentMethod),
            endpoint="retrieve_payment_method",
        )

    def update_payment_method(
        self, payment_method_id: str, payment_method: PaymentMethod
    ) -> Result[PaymentMethod]:
        """
        Update billing and metadata of a payment method

        Other fields set on ``payment_method`` are ignored.
        """
        return self.http.request(
            "PUT",
            f"/payment_methods/{payment_method_id}",
            body=payment_method.to_payload(include=PaymentMethod.updatable_fields),
            parse=one(PaymentMethod),
            endpoint="update_payment_method",
        )
