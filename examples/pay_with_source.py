"""
GCash / GrabPay Source Example (async)

Creates a source, waits until the customer authorizes it, then charges it.

Usage:
    python pay_with_source.py gcash 150.00
"""

import asyncio
import sys

from paymongo_sdk import (
    Address,
    AsyncPaymongoClient,
    Billing,
    Currency,
    Payment,
    Redirect,
    Source,
    SourceStatus,
    SourceType,
    to_minor_units,
)

POLL_INTERVAL = 3
FINAL = {SourceStatus.CANCELLED, SourceStatus.EXPIRED, SourceStatus.FAILED}


async def main(source_type: str = "gcash", amount: str = "100.00"):
    async with AsyncPaymongoClient.from_env() as client:
        source = await client.sources.create_source(
            Source(
                amount=to_minor_units(amount),
                currency=Currency.PHP,
                type=SourceType(source_type),
                description=f"New {source_type} payment",
                billing=Billing(
                    name="TestName",
                    email="test@paymongo.com",
                    phone="9063364572",
                    address=Address(
                        line1="TestAddress1",
                        city="TestCity",
                        state="TestState",
                        postal_code="4506",
                        country="PH",
                    ),
                ),
                redirect=Redirect(success="http://127.0.0.1", failed="http://127.0.0.1"),
            )
        )

        print(f"✓ Source created: {source.id}")
        print(f"  Authorize at: {source.redirect.checkout_url}")

        while True:
            await asyncio.sleep(POLL_INTERVAL)
            source = await client.sources.retrieve_source(source.id)
            if source.status in FINAL:
                print(f"\n✗ Source {source.status.value}")
                return
            if source.status == SourceStatus.CHARGEABLE:
                break

        print(f"\n✓ Chargeable by {source.billing.name} on {source.updated_at}")

        payment = await client.payments.create_payment(
            Payment.for_source(source, description=source.description)
        )
        print(f"✓ Payment {payment.id}: {payment.status.value}")


if __name__ == "__main__":
    asyncio.run(main(*sys.argv[1:3]))
