"""
FastAPI application - HTTP wrapper around the chip engine.

Endpoints:
- POST /v1/compute_chips: hydrate (merchant_id form) then compute. Always
  answers 200; the body's `option` says "success" or "error".
- GET /health: liveness check.

Run with: uvicorn smart_chips.api.main:app
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import time
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from smart_chips.engine.compute import compute_chips
from smart_chips.error_handler import ErrorHandler
from smart_chips.merchants.hydrate import hydrate_request_with_merchant_config
from smart_chips.merchants.store import MerchantConfigStore
from smart_chips.utils.settings import Settings, load_settings

logger = logging.getLogger(__name__)

LATENCY_HEADER = "X-Latency-Ms"


def _compute_payload(body: Any, store: Optional[MerchantConfigStore]) -> Dict[str, Any]:
    hydrated = hydrate_request_with_merchant_config(body, store)
    if not hydrated.ok:
        return {"option": "error", "chips": [], "trace": [], "error": hydrated.error}
    return compute_chips(hydrated.request).to_payload()


def create_app(
    store: Optional[MerchantConfigStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        store: merchant lookup for the merchant_id form; defaults to the
            packaged YAML store, loaded on the first merchant request
        settings: runtime settings; read from the environment when omitted
    """
    settings = settings or load_settings()
    error_handler = ErrorHandler()

    app = FastAPI(
        title="Smart Chips Engine",
        description="Ranks quick-reply chips from search stats, session context and merchant config",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[LATENCY_HEADER],
    )

    @app.post("/v1/compute_chips", tags=["Chips"])
    async def compute_chips_endpoint(request: Request) -> JSONResponse:
        """Compute ranked chips for a full request or a merchant_id request."""
        start = time.perf_counter()
        try:
            body = await request.json()
        except ValueError:
            # Not JSON: let the validator report it like any other bad body
            body = None

        try:
            payload = _compute_payload(body, store)
        except Exception as exc:
            payload = error_handler.handle_exception(exc, context={"path": request.url.path})

        latency_ms = (time.perf_counter() - start) * 1000
        return JSONResponse(content=payload, headers={LATENCY_HEADER: f"{latency_ms:.2f}"})

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Liveness check."""
        return {"status": "ok"}

    return app


_settings = load_settings()
logging.basicConfig(level=getattr(logging, _settings.log_level, logging.INFO))

app = create_app(settings=_settings)
