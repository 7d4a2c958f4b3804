import json

from smart_chips.cli import build_request, main


def test_list_presets(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "mixed_bag" in out
    assert "policy_returns" in out


def test_stats_preset_runs_discovery_modules(capsys):
    assert main(["--preset", "mixed_bag"]) == 0
    result = json.loads(capsys.readouterr().out)

    assert result["option"] == "success"
    assert len(result["chips"]) == 6
    assert result["chips"][0]["label"] == "Under $450"


def test_request_preset_with_channel_override(capsys):
    assert main(["--preset", "checkout_with_cart", "--channel", "whatsapp"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert len(result["chips"]) == 3


def test_unknown_preset(capsys):
    assert main(["--preset", "nope"]) == 2
    assert "Unknown preset" in capsys.readouterr().err


def test_request_file(tmp_path, capsys):
    path = tmp_path / "request.json"
    path.write_text(json.dumps({"garbage": True}), encoding="utf-8")

    assert main(["--file", str(path)]) == 1
    assert json.loads(capsys.readouterr().out)["option"] == "error"


def test_build_request_with_merchant_drops_inline_config():
    request = build_request(preset="mixed_bag", merchant_id="demo-dollar-store", channel="whatsapp")

    assert "config" not in request
    assert request["merchant_id"] == "demo-dollar-store"
    assert request["channel"] == "whatsapp"


def test_merchant_preset_uses_merchant_toggles(capsys):
    assert main(["--preset", "mixed_bag", "--merchant", "demo-dollar-store"]) == 0
    result = json.loads(capsys.readouterr().out)

    budget = next(t for t in result["trace"] if t["module"] == "BudgetModule")
    assert budget["fired"] is False
    assert budget["reason"] == "Module disabled by config"
