"""
Checkout Session Example

Creates a checkout session offering every e-wallet and card, then waits for
the payment. Expires the session if interrupted.
"""

import sys
import time

from paymongo_sdk import (
    Checkout,
    Currency,
    LineItem,
    PaymentMethodType,
    PaymentStatus,
    PaymongoClient,
    to_minor_units,
)

POLL_INTERVAL = 3


def main(amount: str = "100.00"):
    with PaymongoClient.from_env() as client:
        checkout = client.checkouts.create_checkout(
            Checkout(
                description="Test Checkout",
                reference_number="9282321A",
                line_items=[
                    LineItem(
                        name="Give You Up",
                        quantity=1,
                        currency=Currency.PHP,
                        amount=to_minor_units(amount),
                    )
                ],
                payment_method_types=[
                    PaymentMethodType.GCASH,
                    PaymentMethodType.CARD,
                    PaymentMethodType.PAYMAYA,
                    PaymentMethodType.BILLEASE,
                    PaymentMethodType.DOB,
                    PaymentMethodType.GRAB_PAY,
                    PaymentMethodType.DOB_UBP,
                ],
            )
        )

        print(f"✓ Checkout session created: {checkout.id}")
        print(f"  Pay at: {checkout.checkout_url}")

        try:
            while True:
                time.sleep(POLL_INTERVAL)
                current = client.checkouts.retrieve_checkout(checkout.id)
                paid = [p for p in current.payments or [] if p.status == PaymentStatus.PAID]
                if paid:
                    payment = paid[0]
                    print(
                        f"\n✓ Paid by {payment.billing.name} on {payment.paid_at} "
                        f"using {payment.source['type']}"
                    )
                    break
        except KeyboardInterrupt:
            expired = client.checkouts.expire_checkout(checkout.id)
            print(f"\nCheckout session {expired.id} is now {expired.status.value}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
