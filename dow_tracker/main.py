from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from dow_tracker.api.routes import router
from dow_tracker.config.settings import Settings, get_settings
from dow_tracker.integrations.finnhub_rest import FinnhubRestClient
from dow_tracker.services.dow_service import DowQuoteService
from dow_tracker.services.threshold_store import build_threshold_store
from dow_tracker.services.threshold_tracker import ThresholdTracker


def build_dow_service(settings: Settings) -> DowQuoteService:
    return DowQuoteService(
        rest_client=FinnhubRestClient(
            api_key=settings.require_finnhub_api_key(),
            base_url=settings.FINNHUB_BASE_URL,
        ),
        tracker=ThresholdTracker(store=build_threshold_store(settings)),
    )


app = FastAPI(title="DOW Tracker", version="0.1.0")
app.include_router(router, prefix="/api")

# NOTE: lazy-loaded so the API key is checked per request, not at import.
app.state.get_settings = get_settings
app.state.build_dow_service = build_dow_service


@app.get('/')
def health():
    return {'status': 'ok'}


def run() -> None:
    uvicorn.run("dow_tracker.main:app", host="127.0.0.1", port=8000)
