"""
Order confirmation message templates.

Templates support variable substitution using Python's string formatting.

Design decisions:
- Templates are stored as simple strings with {variable} placeholders
- Separate templates for email (longer) and SMS (shorter, 160 char limit)
- The first sentence of each body is fixed wording customers and tests rely on
"""

from dataclasses import dataclass

from storefront.models import CartItem


CONFIRMATION_SUBJECT = "Order Confirmation"


@dataclass
class NotificationTemplate:
    """
    A notification template with email and SMS variants.

    Email templates can be longer and include more detail.
    SMS templates must be concise (ideally under 160 characters).
    """
    email_subject: str
    email_body: str
    sms_body: str

    def render_email(self, **kwargs) -> tuple[str, str]:
        """
        Render the email template with provided variables.

        Returns:
            Tuple of (subject, body)
        """
        return (
            self.email_subject.format(**kwargs),
            self.email_body.format(**kwargs),
        )

    def render_sms(self, **kwargs) -> str:
        """Render the SMS template with provided variables."""
        return self.sms_body.format(**kwargs)


ORDER_CONFIRMATION = NotificationTemplate(
    email_subject=CONFIRMATION_SUBJECT,
    email_body="""Hello,

Your order #{order_id} has been created successfully.

Items:
{item_list}

Order Total: ${total_amount:.2f}

Thanks for shopping with us!
""",
    sms_body="Your order #{order_id} has been confirmed. Total: ${total_amount:.2f}",
)


def format_item_list(items: list[CartItem]) -> str:
    """
    Format cart line items for inclusion in the email body.

    Returns:
        One indented line per item, or a placeholder when there are none
    """
    lines = [f"  - Product {item.product_id} (x{item.quantity})" for item in items]
    return "\n".join(lines) if lines else "  (no items)"
