"""Unit tests for the pure cart transitions."""
from pico_cart.cart import add_product, decrement_item, find_item, increment_item
from pico_cart.models import LineItem

from conftest import HAT, MUG, SHIRT


def _cart(*pairs):
    return tuple(LineItem.from_product(p).with_quantity(q) for p, q in pairs)


class TestAddProduct:
    """Tests for add_product."""

    def test_appends_new_item_with_quantity_one(self):
        """A product not yet in the cart is appended with quantity 1."""
        cart = add_product((), SHIRT)

        assert cart == (LineItem(id="p1", title="Shirt", image_url="u", price=10, quantity=1),)

    def test_existing_item_is_incremented_not_duplicated(self):
        """Adding a product already present bumps its quantity."""
        cart = add_product(_cart((SHIRT, 1)), SHIRT)

        assert len(cart) == 1
        assert cart[0].quantity == 2

    def test_new_items_go_to_the_end(self):
        """Insertion order is preserved."""
        cart = add_product(add_product(add_product((), SHIRT), MUG), HAT)

        assert [item.id for item in cart] == ["p1", "p2", "p3"]

    def test_ids_stay_unique_over_many_adds(self):
        """No sequence of adds creates two entries with the same id."""
        cart = ()
        for product in [SHIRT, MUG, SHIRT, HAT, MUG, SHIRT]:
            cart = add_product(cart, product)

        ids = [item.id for item in cart]
        assert len(ids) == len(set(ids))
        assert find_item(cart, "p1").quantity == 3

    def test_input_cart_is_not_modified(self):
        """Transitions return a new cart."""
        original = _cart((SHIRT, 1))
        add_product(original, SHIRT)

        assert original[0].quantity == 1


class TestIncrementItem:
    """Tests for increment_item."""

    def test_only_target_quantity_changes(self):
        """Increment touches exactly one entry, by exactly one."""
        before = _cart((SHIRT, 1), (MUG, 3), (HAT, 2))
        after = increment_item(before, "p2")

        assert after[0] == before[0]
        assert after[2] == before[2]
        assert after[1] == before[1].with_quantity(4)

    def test_unknown_id_returns_equal_cart(self):
        """Unknown ids leave the cart as it was."""
        before = _cart((SHIRT, 1))

        assert increment_item(before, "missing") == before


class TestDecrementItem:
    """Tests for decrement_item."""

    def test_unknown_id_returns_none(self):
        """Nothing to write when the id is absent."""
        assert decrement_item(_cart((SHIRT, 1)), "missing") is None

    def test_quantity_two_becomes_one(self):
        """The entry stays with one less unit."""
        after = decrement_item(_cart((SHIRT, 2)), "p1")

        assert after == _cart((SHIRT, 1))

    def test_quantity_one_removes_entry(self):
        """Reaching zero removes the entry entirely."""
        assert decrement_item(_cart((SHIRT, 1)), "p1") == ()

    def test_removal_keeps_order_of_the_rest(self):
        """Remaining entries keep their relative order."""
        after = decrement_item(_cart((SHIRT, 1), (MUG, 1), (HAT, 5)), "p2")

        assert [item.id for item in after] == ["p1", "p3"]
        assert after[1].quantity == 5

    def test_no_zero_quantity_ever_observed(self):
        """Quantities stay >= 1 across mixed operations."""
        cart = ()
        for op, product in [
            ("add", SHIRT), ("add", MUG), ("dec", SHIRT), ("dec", MUG),
            ("dec", MUG), ("add", HAT), ("inc", HAT), ("dec", HAT),
        ]:
            if op == "add":
                cart = add_product(cart, product)
            elif op == "inc":
                cart = increment_item(cart, product.id)
            else:
                decremented = decrement_item(cart, product.id)
                cart = cart if decremented is None else decremented
            assert all(item.quantity >= 1 for item in cart)

        assert cart == _cart((HAT, 1))
