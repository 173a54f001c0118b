from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from dow_tracker.errors import ConfigurationError

router = APIRouter()

_CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}
_SUCCESS_HEADERS = {**_CORS_HEADERS, "Cache-Control": "public, max-age=15"}


def _error_body(message: str) -> dict:
    return {'error': message, 'dow': None}


@router.get('/dow')
def get_dow(request: Request):
    settings = request.app.state.get_settings()
    try:
        settings.require_finnhub_api_key()
    except ConfigurationError as exc:
        print(f"[DOW][config_missing] error={exc}", flush=True)
        return JSONResponse(status_code=500, content=_error_body(str(exc)))

    try:
        service = request.app.state.build_dow_service(settings)
        summary = service.get_summary()
    except Exception as exc:
        print(
            f"[DOW][request_failed] error_type={type(exc).__name__} error={exc}",
            flush=True,
        )
        return JSONResponse(status_code=500, content=_error_body(str(exc)), headers=_CORS_HEADERS)

    return JSONResponse(
        status_code=200,
        content=summary.model_dump(by_alias=True),
        headers=_SUCCESS_HEADERS,
    )
