"""Unit tests for the CartEngine domain service.

Uses an in-memory fake store to check that every mutation persists.
"""

import random

from shophub.domain.model.cart import Cart, CartLine
from shophub.domain.model.value_objects import Money, Quantity
from shophub.domain.service.cart_engine import CartEngine, CartIssue
from tests.fakes import FakeCartStore, make_product


def _engine(*products, store=None):
    store = store or FakeCartStore()
    if not products:
        products = (make_product("A", price="10.00", stock=3),)
    return CartEngine(products, store), store


class TestAddOne:

    def test_first_add_opens_line_with_quantity_one(self):
        engine, store = _engine()
        cart = Cart()
        result = engine.add_one(cart, "A")
        assert result.ok
        assert result.issues == ()
        assert result.line.quantity.value == 1
        assert result.message == "Product A added to cart!"
        assert cart.quantity_of("A") == 1

    def test_second_add_increments(self):
        engine, _ = _engine()
        cart = Cart()
        engine.add_one(cart, "A")
        engine.add_one(cart, "A")
        assert cart.quantity_of("A") == 2
        assert len(cart.lines) == 1

    def test_new_lines_are_appended(self):
        engine, _ = _engine(make_product("A"), make_product("B"))
        cart = Cart()
        engine.add_one(cart, "B")
        engine.add_one(cart, "A")
        engine.add_one(cart, "B")
        assert [line.product_id for line in cart.lines] == ["B", "A"]

    def test_add_up_to_stock_then_refused(self):
        engine, store = _engine(make_product("A", stock=4))
        cart = Cart()
        for _ in range(4):
            assert engine.add_one(cart, "A").ok
        saves = store.save_count

        result = engine.add_one(cart, "A")

        assert not result.ok
        assert result.has(CartIssue.STOCK_EXCEEDED)
        assert result.stock == 4
        assert result.message == "Cannot add more! Only 4 available in stock."
        assert cart.quantity_of("A") == 4
        assert store.save_count == saves

    def test_out_of_stock_product_cannot_be_added(self):
        engine, store = _engine(make_product("Z", stock=0))
        cart = Cart()
        result = engine.add_one(cart, "Z")
        assert result.has(CartIssue.STOCK_EXCEEDED)
        assert cart.is_empty
        assert store.save_count == 0

    def test_unknown_product_rejected_without_mutation(self):
        engine, store = _engine()
        cart = Cart()
        result = engine.add_one(cart, "missing")
        assert not result.ok
        assert result.issues == (CartIssue.UNKNOWN_PRODUCT,)
        assert result.message == "Product not found"
        assert cart.is_empty
        assert store.save_count == 0

    def test_add_persists_snapshot(self):
        engine, store = _engine()
        cart = Cart()
        engine.add_one(cart, "A")
        assert store.save_count == 1
        assert store.saved.quantity_of("A") == 1


class TestSetQuantity:

    def _cart_with(self, engine, product_id="A", times=1):
        cart = Cart()
        for _ in range(times):
            engine.add_one(cart, product_id)
        return cart

    def test_set_within_range(self):
        engine, _ = _engine()
        cart = self._cart_with(engine)
        result = engine.set_quantity(cart, "A", 3)
        assert result.ok
        assert result.issues == ()
        assert cart.quantity_of("A") == 3

    def test_zero_clamps_to_one(self):
        engine, _ = _engine()
        cart = self._cart_with(engine, times=2)
        result = engine.set_quantity(cart, "A", 0)
        assert result.ok
        assert result.issues == (CartIssue.BELOW_MINIMUM,)
        assert result.message == "Minimum quantity is 1"
        assert cart.quantity_of("A") == 1

    def test_negative_clamps_to_one(self):
        engine, _ = _engine()
        cart = self._cart_with(engine)
        result = engine.set_quantity(cart, "A", -7)
        assert result.has(CartIssue.BELOW_MINIMUM)
        assert cart.quantity_of("A") == 1

    def test_above_stock_clamps_to_stock(self):
        engine, _ = _engine()
        cart = self._cart_with(engine)
        result = engine.set_quantity(cart, "A", 3 + 5)
        assert result.ok
        assert result.issues == (CartIssue.STOCK_EXCEEDED,)
        assert result.message == "Maximum available is 3"
        assert cart.quantity_of("A") == 3

    def test_without_line_is_unknown(self):
        engine, store = _engine()
        cart = Cart()
        result = engine.set_quantity(cart, "A", 2)
        assert not result.ok
        assert result.has(CartIssue.UNKNOWN_PRODUCT)
        assert cart.is_empty
        assert store.save_count == 0

    def test_line_for_product_missing_from_catalog_is_unknown(self):
        engine, _ = _engine()
        cart = Cart([CartLine("ghost", "Ghost", Money.of("1"), Quantity(1))])
        result = engine.set_quantity(cart, "ghost", 1)
        assert result.has(CartIssue.UNKNOWN_PRODUCT)
        assert cart.quantity_of("ghost") == 1

    def test_zero_stock_product_line_is_removed(self):
        engine, _ = _engine(make_product("Z", stock=0))
        cart = Cart([CartLine("Z", "Zed", Money.of("1"), Quantity(2))])
        result = engine.set_quantity(cart, "Z", 1)
        assert result.has(CartIssue.STOCK_EXCEEDED)
        assert cart.quantity_of("Z") == 0

    def test_set_persists(self):
        engine, store = _engine()
        cart = self._cart_with(engine)
        engine.set_quantity(cart, "A", 2)
        assert store.saved.quantity_of("A") == 2


class TestRemove:

    def test_remove_deletes_line(self):
        engine, store = _engine()
        cart = Cart()
        engine.add_one(cart, "A")
        result = engine.remove(cart, "A")
        assert result.ok
        assert result.message == "Item removed from cart."
        assert cart.is_empty
        assert store.saved.is_empty

    def test_remove_absent_line_is_noop(self):
        engine, _ = _engine()
        cart = Cart()
        result = engine.remove(cart, "A")
        assert result.ok
        assert result.issues == ()
        assert cart.is_empty

    def test_remove_unknown_product_is_noop(self):
        engine, _ = _engine()
        result = engine.remove(Cart(), "does-not-exist")
        assert result.ok

    def test_clear_empties_and_persists(self):
        engine, store = _engine(make_product("A"), make_product("B"))
        cart = Cart()
        engine.add_one(cart, "A")
        engine.add_one(cart, "B")
        engine.clear(cart)
        assert cart.is_empty
        assert store.saved.is_empty


class TestQueries:

    def test_available_stock_subtracts_cart_quantity(self):
        engine, _ = _engine(make_product("A", stock=5))
        cart = Cart()
        assert engine.available_stock(cart, "A") == 5
        engine.add_one(cart, "A")
        engine.add_one(cart, "A")
        assert engine.available_stock(cart, "A") == 3

    def test_available_stock_unknown_product_is_zero(self):
        engine, _ = _engine()
        assert engine.available_stock(Cart(), "missing") == 0

    def test_available_stock_never_negative(self):
        engine, _ = _engine(make_product("A", stock=1))
        cart = Cart([CartLine("A", "A", Money.of("1"), Quantity(4))])
        assert engine.available_stock(cart, "A") == 0

    def test_out_of_stock_ignores_cart(self):
        engine, _ = _engine(make_product("A", stock=1), make_product("Z", stock=0))
        cart = Cart()
        engine.add_one(cart, "A")
        assert not engine.is_out_of_stock("A")
        assert engine.is_out_of_stock("Z")
        assert engine.is_out_of_stock("missing")


class TestReconcile:

    def test_over_quota_line_is_clamped(self):
        engine, store = _engine(make_product("A", stock=2))
        cart = Cart([CartLine("A", "A", Money.of("1"), Quantity(5))])
        adjustments = engine.reconcile(cart)
        assert cart.quantity_of("A") == 2
        assert len(adjustments) == 1
        assert adjustments[0].previous_quantity == 5
        assert adjustments[0].new_quantity == 2
        assert not adjustments[0].dropped
        assert store.saved.quantity_of("A") == 2

    def test_vanished_and_sold_out_lines_are_dropped(self):
        engine, _ = _engine(make_product("A", stock=3), make_product("Z", stock=0))
        cart = Cart([
            CartLine("ghost", "Ghost", Money.of("1"), Quantity(1)),
            CartLine("A", "A", Money.of("1"), Quantity(1)),
            CartLine("Z", "Zed", Money.of("1"), Quantity(1)),
        ])
        adjustments = engine.reconcile(cart)
        assert [line.product_id for line in cart.lines] == ["A"]
        assert {a.product_id for a in adjustments} == {"ghost", "Z"}
        assert all(a.dropped for a in adjustments)

    def test_consistent_cart_is_left_alone(self):
        engine, store = _engine()
        cart = Cart([CartLine("A", "A", Money.of("10"), Quantity(3))])
        assert engine.reconcile(cart) == []
        assert store.save_count == 0


class TestInvariants:

    def test_random_operations_stay_within_stock(self):
        products = [
            make_product("A", stock=3),
            make_product("B", stock=0),
            make_product("C", stock=7),
        ]
        engine, _ = _engine(*products)
        cart = Cart()
        rng = random.Random(1234)
        ids = ["A", "B", "C", "missing"]

        for _ in range(500):
            pid = rng.choice(ids)
            op = rng.randrange(3)
            if op == 0:
                engine.add_one(cart, pid)
            elif op == 1:
                engine.set_quantity(cart, pid, rng.randint(-3, 12))
            else:
                engine.remove(cart, pid)

            for p in products:
                assert 0 <= cart.quantity_of(p.id) <= p.stock
            assert cart.quantity_of("missing") == 0
            assert len({line.product_id for line in cart.lines}) == len(cart.lines)


class TestCartScenario:

    def test_add_clamp_and_remove_walkthrough(self):
        engine, store = _engine(make_product("A", price="10.00", stock=3))
        cart = Cart()

        engine.add_one(cart, "A")
        assert cart.quantity_of("A") == 1
        assert str(cart.subtotal) == "$10.00"

        engine.add_one(cart, "A")
        assert cart.quantity_of("A") == 2
        assert str(cart.subtotal) == "$20.00"

        engine.add_one(cart, "A")
        assert cart.quantity_of("A") == 3
        assert str(cart.subtotal) == "$30.00"

        result = engine.add_one(cart, "A")
        assert result.has(CartIssue.STOCK_EXCEEDED)
        assert cart.quantity_of("A") == 3

        engine.set_quantity(cart, "A", 1)
        assert cart.quantity_of("A") == 1
        assert str(cart.subtotal) == "$10.00"
        assert str(cart.total) == "$11.00"

        engine.remove(cart, "A")
        assert cart.is_empty
        assert str(cart.subtotal) == "$0.00"
        assert store.saved.is_empty
