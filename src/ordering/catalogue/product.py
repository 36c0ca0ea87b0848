"""Product aggregate: catalogue entry whose price is snapshotted into orders."""

from protean.exceptions import ValidationError
from protean.fields import Float, String

from ordering.domain import ordering


@ordering.aggregate
class Product:
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)

    def change_price(self, new_price):
        """Set a new list price. Existing orders keep the price they were placed at."""
        if new_price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})
        self.price = new_price
