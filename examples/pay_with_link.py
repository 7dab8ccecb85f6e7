"""
Payment Link Example

Creates a payment link and polls it until the first payment is paid.
Reads SECRET_KEY / PAYMONGO_SECRET_KEY from the environment or a .env file.
"""

import sys
import time
from decimal import Decimal

from paymongo_sdk import Currency, Link, PaymentStatus, PaymongoClient, to_minor_units

MINIMUM_AMOUNT = Decimal("100")
POLL_INTERVAL = 3


def main(amount: str = "100.00"):
    value = Decimal(amount)
    if value < MINIMUM_AMOUNT:
        print(f"Amount must be at least {MINIMUM_AMOUNT} PHP")
        return

    with PaymongoClient.from_env() as client:
        link = client.links.create_link(
            Link(amount=to_minor_units(value), currency=Currency.PHP, description="Payment for")
        )

        print(f"✓ Link created: {link.id} (ref {link.reference_number})")
        print(f"  Pay at: {link.checkout_url}")

        while True:
            time.sleep(POLL_INTERVAL)
            current = client.links.retrieve_link(link.id)
            if not current.payments:
                continue

            payment = current.payments[0]
            if payment.status != PaymentStatus.PAID:
                continue

            print(
                f"\n✓ Paid by {payment.billing.name} on {payment.paid_at} "
                f"using {payment.source['type']}"
            )
            break


if __name__ == "__main__":
    main(*sys.argv[1:2])
