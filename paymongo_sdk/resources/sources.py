"""
Sources API
"""

from paymongo_sdk.models import Source

from .base import Resource, Result, one


class SourceClient(Resource):
    """Sources API (GCash / GrabPay)"""

    def create_source(self, source: Source) -> Result[Source]:
        """
        Create a source

        Sources are created with the public key when one is configured.

        Args:
            source: Source with amount, currency, type and redirect URLs

        Returns:
            Pending source; send the customer to ``redirect.checkout_url``
        """
        return self.http.request(
            "POST",
            "/sources",
            body=source.to_payload(),
            parse=one(Source),
            use_public_key=True,
            endpoint="create_source",
        )

    def retrieve_source(self, source_id: str) -> Result[Source]:
        return self.http.request(
            "GET",
            f"/sources/{source_id}",
            parse=one(Source),
            endpoint="retrieve_source",
        )
