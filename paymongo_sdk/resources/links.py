"""
Payment Links API
"""

from typing import Optional

from paymongo_sdk.models import Link

from .base import Resource, Result, first_or_none, one


class LinksClient(Resource):
    """Payment Links API"""

    def create_link(self, link: Link) -> Result[Link]:
        """
        Create a payment link

        Args:
            link: Link with amount (minor units), description and optional remarks

        Returns:
            Created link with ``checkout_url`` and ``reference_number``
        """
        return self.http.request(
            "POST",
            "/links",
            body=link.to_payload(),
            parse=one(Link),
            endpoint="create_link",
        )

    def retrieve_link(self, link_id: str) -> Result[Link]:
        return self.http.request(
            "GET",
            f"/links/{link_id}",
            parse=one(Link),
            endpoint="retrieve_link",
        )

    def retrieve_link_by_reference_number(self, reference_number: str) -> Result[Optional[Link]]:
        """
        Look up a link by the reference number shown to the customer

        Returns:
            Matching link, or None when there is none
        """
        return self.http.request(
            "GET",
            "/links",
            params={"reference_number": reference_number},
            parse=first_or_none(Link),
            endpoint="retrieve_link_by_reference_number",
        )

    def archive_link(self, link_id: str) -> Result[Link]:
        return self.http.request(
            "POST",
            f"/links/{link_id}/archive",
            parse=one(Link),
            endpoint="archive_link",
        )

    def unarchive_link(self, link_id: str) -> Result[Link]:
        return self.http.request(
            "POST",
            f"/links/{link_id}/unarchive",
            parse=one(Link),
            endpoint="unarchive_link",
        )
