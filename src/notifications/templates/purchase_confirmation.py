"""Purchase confirmation template — sent once an order is confirmed."""

from html import escape


class PurchaseConfirmationTemplate:
    notification_type = "purchase_confirmation"

    @staticmethod
    def render(context: dict) -> dict:
        customer_name = context.get("customer_name", "there")
        product = context.get("product_name") or "Nothing"
        order_id = context.get("order_id", "N/A")

        body = (
            f"Congratulations, {customer_name}!\n\n"
            f"You have successfully purchased {product} from buyNothing.com.\n\n"
            f"Order Number: {order_id}\n"
            f"Product: {product}\n\n"
            "As clearly stated on our website, you will receive absolutely nothing in return "
            "for this purchase. No physical items will be shipped and no digital downloads "
            "will be provided. You now own premium nothing, and this purchase is final.\n\n"
            "Best regards,\n"
            "The buyNothing.com Team"
        )
        return {
            "subject": f"Purchase Confirmation - You've Successfully Bought {product}!",
            "body": body,
            "html_body": _HTML.format(
                customer_name=escape(customer_name),
                product=escape(product),
                order_id=escape(order_id),
            ),
        }


_HTML = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Purchase Confirmation</title>
  <style>
    body {{ font-family: 'Inter', Arial, sans-serif; line-height: 1.6; color: #333; margin: 0; padding: 0; background-color: #f9f9f9; }}
    .container {{ max-width: 600px; margin: 0 auto; background-color: white; }}
    .header {{ background-color: #000; color: white; padding: 40px 30px; text-align: center; }}
    .header h1 {{ margin: 0; font-size: 28px; font-weight: 700; }}
    .content {{ padding: 40px 30px; }}
    .order-details {{ background-color: #f8f9fa; padding: 20px; border-radius: 8px; margin: 20px 0; }}
    .disclaimer {{ background-color: #fff3cd; border: 1px solid #ffeaa7; padding: 20px; border-radius: 8px; margin: 20px 0; }}
    .footer {{ background-color: #000; color: white; padding: 30px; text-align: center; }}
    .checkmark {{ color: #28a745; font-size: 20px; }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1>buyNothing.com</h1>
      <p>Purchase Confirmation</p>
    </div>
    <div class="content">
      <h2>Congratulations, {customer_name}!</h2>
      <p>You have successfully purchased <strong>{product}</strong> from buyNothing.com.</p>
      <div class="order-details">
        <h3>Order Details</h3>
        <p><strong>Order Number:</strong> {order_id}</p>
        <p><strong>Product:</strong> {product}</p>
      </div>
      <div class="disclaimer">
        <h3>Important Reminder</h3>
        <p>As clearly stated on our website, you will receive <strong>absolutely nothing</strong> in return for this purchase.</p>
        <ul>
          <li><span class="checkmark">&#10003;</span> No physical items will be shipped</li>
          <li><span class="checkmark">&#10003;</span> No digital downloads will be provided</li>
          <li><span class="checkmark">&#10003;</span> You now own premium nothing</li>
          <li><span class="checkmark">&#10003;</span> This purchase is final</li>
        </ul>
      </div>
      <p>Thank you for supporting the art of nothingness.</p>
      <p>Best regards,<br>The buyNothing.com Team</p>
    </div>
    <div class="footer">
      <p>buyNothing.com - All rights reserved. Nothing guaranteed.</p>
      <p>You purchased nothing, and that's exactly what you'll get.</p>
    </div>
  </div>
</body>
</html>
"""
