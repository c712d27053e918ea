from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def json_body() -> dict:
    return request.get_json(silent=True) or {}


def api_errors(view):
    """Map domain errors raised by a view onto JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except StoreError as e:
            logger.warning("Record store failure in %s: %s", request.path, e)
            return jsonify({"success": False, "message": str(e)}), 502
        except Exception:
            logger.exception("Unexpected error in %s", request.path)
            return jsonify({"success": False, "message": "Internal server error"}), 500

    return wrapper
