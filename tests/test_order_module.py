from smart_chips.modules.order import OrderModule

order = OrderModule()

STORE = {"integration_type": "shopify", "support_phone": "+1-800-555-0199"}


def _known(*orders):
    return {"auth_state": "known", "recent_orders": [{"id": i, "status": s} for i, s in orders]}


def test_without_context_does_not_fire(parse_request):
    result = order.execute(parse_request())

    assert result.fired is False
    assert result.chips == []
    assert result.trace.reason == "No order context provided in request"


def test_other_context_kind_does_not_fire(parse_request):
    result = order.execute(parse_request(context={"policy_type": "returns"}))
    assert result.fired is False


def test_unknown_user_gets_login_options_and_agent(parse_request):
    result = order.execute(parse_request(context={"auth_state": "unknown", "recent_orders": []}, store=STORE))

    assert result.fired is True
    assert [(c.label, c.action, c.priority) for c in result.chips] == [
        ("Login with Phone", "auth:phone_login", 95),
        ("Enter Order ID", "auth:manual_order_id", 90),
        ("Talk to Agent", "handoff:phone:+1-800-555-0199", 60),
    ]
    assert result.trace.reason == "User unknown: offered login + manual entry + agent handoff"


def test_unknown_user_without_support_phone(parse_request):
    result = order.execute(parse_request(context={"auth_state": "unknown", "recent_orders": []}))

    assert [c.label for c in result.chips] == ["Login with Phone", "Enter Order ID"]
    assert result.trace.reason == "User unknown: offered login + manual entry"


def test_known_user_tracks_active_orders(parse_request):
    context = _known(("1001", "shipped"), ("1002", "processing"))
    result = order.execute(parse_request(context=context, store=STORE))

    assert result.fired is True
    assert [(c.label, c.action, c.priority) for c in result.chips] == [
        ("Track #1001", "track_specific_order:1001", 85),
        ("Track #1002", "track_specific_order:1002", 84),
        ("Talk to Agent", "handoff:phone:+1-800-555-0199", 60),
    ]
    assert result.trace.reason == "User known: 2 active order(s), 0 delivered"


def test_returned_orders_not_tracked_and_first_delivered_gets_actions(parse_request):
    context = _known(
        ("A", "returned"),
        ("B", "delivered"),
        ("C", "shipped"),
        ("D", "delivered"),
    )
    result = order.execute(parse_request(context=context))

    actions = [c.action for c in result.chips]
    assert "track_specific_order:A" not in actions
    assert actions == [
        "track_specific_order:B",
        "track_specific_order:C",
        "track_specific_order:D",
        "report_issue:B",
        "start_return:B",
    ]
    assert [c.priority for c in result.chips] == [85, 84, 83, 75, 70]
    assert result.trace.reason == "User known: 3 active order(s), 2 delivered"


def test_known_user_without_orders_still_fires(parse_request):
    result = order.execute(parse_request(context=_known()))

    assert result.fired is True
    assert result.chips == []
    assert result.trace.reason == "User known: 0 active order(s), 0 delivered"
