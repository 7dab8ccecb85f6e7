"""
PayMongo SDK Quickstart Example
"""

import os

from paymongo_sdk import ClientConfig, Currency, Link, PaymongoClient
from paymongo_sdk.exceptions import APIError


def main():
    config = ClientConfig(
        secret_key=os.getenv("PAYMONGO_SECRET_KEY", "sk_test_xxx"),
        debug=True,  # Enable debug logging
    )

    with PaymongoClient(config=config) as client:
        print("Creating payment link...")
        link = client.links.create_link(
            Link(amount=10000, currency=Currency.PHP, description="Invoice 42")
        )
        print(f"✓ Link created: {link.id}")
        print(f"  Checkout URL: {link.checkout_url}")

        print(f"\nLooking up reference number {link.reference_number}...")
        found = client.links.retrieve_link_by_reference_number(link.reference_number)
        print(f"✓ Found: {found.id} ({found.status.value})")

        print("\nArchiving link...")
        archived = client.links.archive_link(link.id)
        print(f"✓ Archived: {archived.archived}")

        try:
            client.payments.retrieve_payment("pay_does_not_exist")
        except APIError as e:
            print(f"\n✗ {e}")
            for error in e.errors:
                print(f"  {error.code}: {error.detail} ({error.attribute})")


if __name__ == "__main__":
    main()
