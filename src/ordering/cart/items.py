"""Cart item management: commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.catalogue.product import Product
from ordering.domain import ordering
from ordering.exceptions import ProductNotFoundError


@ordering.command(part_of="ShoppingCart")
class AddToCart:
    username = String(required=True, max_length=50)
    product_id = Identifier(required=True)
    qty = Integer(required=True, min_value=1)
    color = String(max_length=50)
    material = String(max_length=50)


@ordering.command(part_of="ShoppingCart")
class RemoveFromCart:
    username = String(required=True, max_length=50)
    item_id = Identifier(required=True)


@ordering.command(part_of="ShoppingCart")
class ClearCart:
    username = String(required=True, max_length=50)


@ordering.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        try:
            current_domain.repository_for(Product).get(command.product_id)
        except ObjectNotFoundError as exc:
            raise ProductNotFoundError(f"No product with id {command.product_id}") from exc

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_user(command.username)
        if cart is None:
            cart = ShoppingCart.create(command.username)
        item_id = cart.add_item(
            product_id=command.product_id,
            qty=command.qty,
            color=command.color,
            material=command.material,
        )
        repo.add(cart)
        return item_id

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_user(command.username)
        if cart is None:
            raise ValidationError({"item_id": ["Item not found in cart"]})
        cart.remove_item(command.item_id)
        repo.add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_user(command.username)
        if cart is not None:
            cart.clear()
            repo.add(cart)
