"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from simulator import __version__
from simulator.core.amortization import (
    FILL_IN_MESSAGE,
    InvalidInputError,
    calculate_amortization_schedule,
    normalize_periods,
)
from simulator.schemas.amortization import AmortizationRequest
from simulator.schemas.ping import PingResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected payload: %d validation error(s)", exc.error_count())
    return jsonify({"detail": exc.errors()}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidInputError)
def _handle_invalid_input(exc: InvalidInputError):
    """Refuse the calculation; the client should clear any schedule it shows."""
    logger.warning("refused calculation: %s", exc)
    return jsonify({"error": exc.errors, "message": FILL_IN_MESSAGE}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.post("/calc/compound-interest")
def compound_interest() -> Any:
    """Month-by-month schedule and totals for a compound-interest investment."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = AmortizationRequest.model_validate(raw_payload)

    max_months = current_app.config["SETTINGS"].max_total_months
    if normalize_periods(payload.periods, payload.period_unit) > max_months:
        raise InvalidInputError([f"duration must not exceed {max_months} months"])

    result = calculate_amortization_schedule(payload)
    logger.info(
        "served %d-month schedule (final value %.2f)",
        result.total_months,
        result.summary.final_value,
    )
    return jsonify(result.model_dump(mode="json"))
