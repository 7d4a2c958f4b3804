from smart_chips.modules.cart import CartModule, currency_symbol

cart = CartModule()


def _cart(count, value, currency="USD", methods=("stripe", "cod")):
    return {
        "cart_count": count,
        "cart_value": value,
        "currency": currency,
        "payment_methods": list(methods),
    }


def test_without_context_does_not_fire(parse_request):
    result = cart.execute(parse_request())

    assert result.fired is False
    assert result.trace.reason == "No cart context provided in request"


def test_empty_cart_offers_browse_and_deals_only(parse_request):
    store = {"enable_cod": True, "free_shipping_threshold": 50}
    result = cart.execute(parse_request(context=_cart(0, 0), store=store))

    assert result.fired is True
    assert [(c.label, c.action, c.priority) for c in result.chips] == [
        ("Browse Products", "navigate:shop", 90),
        ("View Deals", "navigate:deals", 85),
    ]
    assert result.trace.reason == "Cart empty: offered browse + deals to recover session"


def test_full_checkout_set(parse_request):
    store = {"enable_cod": True, "free_shipping_threshold": 50}
    result = cart.execute(parse_request(context=_cart(3, 45.0), store=store))

    assert [(c.label, c.action, c.priority) for c in result.chips] == [
        ("Checkout ($45.00)", "checkout:proceed", 95),
        ("Add $5.00 for Free Ship", "navigate:upsell:5.00", 85),
        ("Pay with Cash (COD)", "checkout:cod", 80),
        ("View Cart", "navigate:cart", 70),
    ]
    assert result.trace.reason == "Cart has 3 item(s) worth $45.00 (free shipping at $50)"


def test_no_upsell_when_threshold_reached(parse_request):
    store = {"free_shipping_threshold": 50}
    result = cart.execute(parse_request(context=_cart(2, 50), store=store))

    assert [c.label for c in result.chips] == ["Checkout ($50.00)", "View Cart"]


def test_zero_threshold_means_no_free_shipping_offer(parse_request):
    store = {"free_shipping_threshold": 0}
    result = cart.execute(parse_request(context=_cart(1, 10), store=store))

    assert [c.label for c in result.chips] == ["Checkout ($10.00)", "View Cart"]
    assert result.trace.reason == "Cart has 1 item(s) worth $10.00"


def test_cod_requires_store_flag_and_payment_method(parse_request):
    no_flag = cart.execute(parse_request(context=_cart(1, 10), store={"enable_cod": False}))
    no_method = cart.execute(
        parse_request(context=_cart(1, 10, methods=["stripe"]), store={"enable_cod": True})
    )
    no_store = cart.execute(parse_request(context=_cart(1, 10)))

    for result in (no_flag, no_method, no_store):
        assert "checkout:cod" not in [c.action for c in result.chips]


def test_non_usd_currency_uses_code_as_symbol(parse_request):
    store = {"free_shipping_threshold": 30}
    result = cart.execute(parse_request(context=_cart(2, 12.5, currency="EUR"), store=store))

    assert result.chips[0].label == "Checkout (EUR12.50)"
    assert result.chips[1].label == "Add EUR17.50 for Free Ship"
    assert result.chips[1].action == "navigate:upsell:17.50"


def test_currency_symbol():
    assert currency_symbol("USD") == "$"
    assert currency_symbol("KES") == "KES"


def test_cart_fields_on_order_context_fire(parse_request):
    context = {"auth_state": "known", "recent_orders": [], **_cart(1, 20, methods=("stripe",))}
    request = parse_request(context=context)

    assert type(request.context).__name__ == "OrderContext"
    result = cart.execute(request)
    assert result.fired is True
    assert result.chips[0].action == "checkout:proceed"
