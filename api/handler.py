"""
CAESAR TOOLKIT - Request handler: {text, mode, shift?, language?} in, JSON-shaped result out.
Bad input maps to 400, anything unexpected to an opaque 500.
"""

from typing import Any, Dict, Mapping

from loguru import logger
from pydantic import ValidationError

from core.config import settings
from core.models import (
    MODES,
    AutoRequest,
    BruteRequest,
    DecodeRequest,
    EncodeRequest,
    HandlerResponse,
    Rot13Request,
    cipher_request_adapter,
)
from core.monitors import ActivityMonitor
from cryptanalysis.auto_decode import auto_decode
from cryptanalysis.errors import InvalidArgumentError
from cryptanalysis.languages import LANGUAGES
from cryptanalysis.transforms import ROT13_SHIFT, brute_force, decode, encode, rot13


def _error(message: str, status_code: int = 400) -> HandlerResponse:
    return HandlerResponse(status_code, {"error": message})


def _validation_message(exc: ValidationError, body: Mapping[str, Any]) -> str:
    for err in exc.errors():
        loc = err.get("loc", ())
        if "shift" in loc:
            return "Shift must be an integer"
        if "language" in loc:
            return f"Language '{body.get('language')}' not supported"
    return "Invalid request"


def _parse(body: Mapping[str, Any]):
    """Validate raw body into a mode variant, or return an error response."""
    text = body.get("text")
    if not isinstance(text, str) or not text.strip():
        return _error("Text is required")
    if len(text) > settings.MAX_TEXT_LENGTH:
        return _error("Text is too long")
    mode = body.get("mode")
    if mode not in MODES:
        return _error("Invalid mode")
    if mode in ("encode", "decode") and body.get("shift") is None:
        return _error(f"Shift is required for {mode} mode")
    data = {k: v for k, v in body.items() if v is not None}
    try:
        return cipher_request_adapter.validate_python(data)
    except ValidationError as e:
        return _error(_validation_message(e, body))


def _dispatch(request) -> HandlerResponse:
    if isinstance(request, EncodeRequest):
        return HandlerResponse(200, {"output": encode(request.text, request.shift), "shift": request.shift})
    if isinstance(request, DecodeRequest):
        return HandlerResponse(200, {"output": decode(request.text, request.shift), "shift": request.shift})
    if isinstance(request, Rot13Request):
        return HandlerResponse(200, {"output": rot13(request.text)["encoded"], "shift": ROT13_SHIFT})
    if isinstance(request, BruteRequest):
        all_shifts = brute_force(request.text)
        return HandlerResponse(200, {"output": all_shifts[0]["text"], "allShifts": all_shifts})
    if isinstance(request, AutoRequest):
        outcome = auto_decode(request.text, request.language)
        if not outcome["success"]:
            return _error(outcome.get("message") or "Auto decode failed")
        return HandlerResponse(200, {
            "output": outcome["decoded"],
            "shift": outcome["shift"],
            "confidence": outcome["confidence"],
            "allShifts": outcome["allShifts"],
        })
    raise TypeError(f"Unhandled request type: {type(request).__name__}")


def handle_request(body: Any) -> HandlerResponse:
    """Process one cipher request. Never raises."""
    if not isinstance(body, Mapping):
        ActivityMonitor().emit(None, 400)
        return _error("Invalid request body")
    mode = body.get("mode")
    try:
        parsed = _parse(body)
        response = parsed if isinstance(parsed, HandlerResponse) else _dispatch(parsed)
    except InvalidArgumentError as e:
        response = _error(str(e))
    except Exception:
        logger.exception("Caesar request failed")
        response = _error("Internal server error", 500)
    text = body.get("text")
    logger.info(f"[caesar] mode={mode} status={response.status_code}")
    ActivityMonitor().emit(
        mode if isinstance(mode, str) else None,
        response.status_code,
        text_length=len(text) if isinstance(text, str) else 0,
    )
    return response


def describe_languages() -> Dict[str, Dict[str, Any]]:
    """Built-in language ids with display name and one-letter-word vocabulary."""
    return {
        language_id: {"name": profile.name, "monograms": list(profile.monograms)}
        for language_id, profile in LANGUAGES.items()
    }
