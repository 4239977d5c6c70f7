from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from decimal import Decimal
from functools import wraps
from typing import Any

from flask import jsonify, request

from ..core.exceptions import DataSourceError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def to_json(value: Any) -> Any:
    """Convert dataclasses, dates and decimals into JSON-friendly values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


def ok(payload: Any = None, status: int = 200):
    body = {"success": True}
    if payload is not None:
        body["data"] = to_json(payload)
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def request_data() -> dict:
    """JSON body if present, otherwise form fields."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def api_errors(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except DataSourceError as e:
            return fail(str(e), 503)
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return fail("Internal server error", 500)

    return wrapper
