"""
Run the chip engine from the command line.

- list the built-in scenario presets
- run a preset, a JSON request file, or a merchant_id request through
  hydration + compute
- print chips and trace as JSON

Examples:
    smart-chips-demo --list
    smart-chips-demo --preset mixed_bag
    smart-chips-demo --preset mixed_bag --merchant demo-dollar-store --channel whatsapp
    smart-chips-demo --file request.json -v
"""

from __future__ import annotations

import argparse
import copy
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .contracts.presets import REQUEST_PRESETS, STATS_PRESETS, get_preset
from .engine.compute import compute_chips
from .merchants.hydrate import hydrate_request_with_merchant_config

DISCOVERY_CONFIG: Dict[str, Any] = {
    "modules": {"budget": True, "facet": True, "sort": True, "order": False, "cart": False, "policy": False},
    "thresholds": {"variance": 2.0, "facet_threshold": 0.2, "rating_threshold": 0.5},
}


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def build_request(
    preset: Optional[str] = None,
    merchant_id: Optional[str] = None,
    channel: Optional[str] = None,
    file: Optional[Path] = None,
) -> Any:
    """Assemble a raw request from CLI options (not validated here)."""
    if file is not None:
        with open(file, "r", encoding="utf-8") as f:
            request: Any = json.load(f)
    elif preset in STATS_PRESETS:
        request = {
            "intent": "product_discovery",
            "channel": "web",
            "stats": get_preset(preset),
            "config": copy.deepcopy(DISCOVERY_CONFIG),
        }
    elif preset is not None:
        request = get_preset(preset)
    else:
        raise ValueError("Either a preset or a request file is required")

    if isinstance(request, dict):
        if merchant_id:
            request.pop("config", None)
            request["merchant_id"] = merchant_id
        if channel:
            request["channel"] = channel
    return request


def run(request: Any) -> Dict[str, Any]:
    """Hydrate and compute one raw request, returning the response payload."""
    hydrated = hydrate_request_with_merchant_config(request)
    if not hydrated.ok:
        return {"option": "error", "chips": [], "trace": [], "error": hydrated.error}
    return compute_chips(hydrated.request).to_payload()


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Compute smart chips for a scenario.")
    parser.add_argument("--list", action="store_true", help="List available presets and exit")
    parser.add_argument("--preset", type=str, default=None, help="Preset name (see --list)")
    parser.add_argument("--file", type=Path, default=None, help="JSON file holding a raw request")
    parser.add_argument("--merchant", type=str, default=None, help="Use this merchant's config instead of the inline one")
    parser.add_argument("--channel", choices=["web", "whatsapp"], default=None, help="Override the request channel")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging (per-module decisions)")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.list:
        print("Stats presets (product discovery):")
        for name in STATS_PRESETS:
            print(f"  {name}")
        print("Request presets:")
        for name in REQUEST_PRESETS:
            print(f"  {name}")
        return 0

    if args.preset is None and args.file is None:
        parser.error("one of --list, --preset or --file is required")

    try:
        request = build_request(args.preset, args.merchant, args.channel, args.file)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as e:
        print(f"Error: could not read request: {e}", file=sys.stderr)
        return 2

    result = run(request)
    print(json.dumps(result, indent=2))
    return 0 if result["option"] == "success" else 1


if __name__ == "__main__":
    sys.exit(main())
