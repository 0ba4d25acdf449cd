"""Uniform JSON envelope: {"success", "message", "data"?, "error"?}."""
import logging
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from printbooth.config import get_settings

log = logging.getLogger("uvicorn.error")


def respond_success(status_code: int = 200, message: str = "Success", data: Any = None) -> JSONResponse:
    body = {
        "success": True,
        "message": message,
        "data": {} if data is None else data,
    }
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def respond_error(
    status_code: int = 500,
    message: str = "Server Error",
    error: Any = None,
    data: Any = None,
) -> JSONResponse:
    """Error envelope. The error detail is logged always and echoed only outside production."""
    if error is not None:
        log.error("Error: %s: %s", message, error)

    body: dict[str, Any] = {"success": False, "message": message}
    if data is not None:
        body["data"] = data
    if error is not None and not get_settings().is_production:
        body["error"] = str(error)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))
