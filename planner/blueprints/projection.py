"""
Projection blueprint for net worth planning.

This module exposes the projection engine over JSON: terminal balances,
year-by-year trajectories, the rate by horizon matrix, effective yearly
values, stand-alone mortgage schedules, share links and the saved state.
"""

import json
from typing import Annotated, Any, List, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from planner.config import Settings
from planner.models.amortization import MortgageCalculator
from planner.models.matrix import build_projection_matrix
from planner.models.profile import Profile
from planner.models.projection import project_balance, project_trajectory
from planner.models.resolver import (
    preview_contribution,
    resolve_effective_value,
    savings_rate_exceeds_income,
)
from planner.storage import (
    ProfileStore,
    ShareCodecError,
    StorageError,
    create_storage_service,
    decode_profile,
    encode_profile,
)

projection_bp = Blueprint("projection", __name__, url_prefix="/api")


class ProjectionRequest(BaseModel):
    """Body of the balance and trajectory endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    profile: Profile
    years: int = Field(..., ge=0)
    return_rate: float = Field(..., alias="returnRate")


class MatrixRequest(BaseModel):
    """Body of the matrix endpoint. Omitted options fall back to settings."""

    model_config = ConfigDict(populate_by_name=True)

    profile: Profile
    year_options: Optional[List[Annotated[int, Field(ge=0)]]] = Field(
        default=None, alias="yearOptions"
    )
    return_rate_options: Optional[List[float]] = Field(
        default=None, alias="returnRateOptions"
    )


class EffectiveValuesRequest(BaseModel):
    """Body of the effective values endpoint."""

    profile: Profile
    year: int = Field(..., ge=1)


class ScheduleRequest(BaseModel):
    """Body of the mortgage schedule endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    principal: float
    interest_rate: float = Field(..., alias="interestRate")
    mortgage_term: int = Field(..., ge=0, alias="mortgageTerm")


def _settings() -> Settings:
    return current_app.config["PLANNER_SETTINGS"]


def _profile_store() -> ProfileStore:
    settings = _settings()
    return ProfileStore(
        create_storage_service(settings), key=settings.state_storage_key
    )


def _body() -> Any:
    return request.get_json(silent=True) or {}


def _dump_profile(profile: Profile) -> Any:
    return profile.model_dump(mode="json", by_alias=True, exclude_none=True)


@projection_bp.errorhandler(ValidationError)
def handle_validation_error(error: ValidationError) -> Any:
    return (
        jsonify(
            {
                "error": "Invalid request",
                "details": json.loads(error.json(include_url=False)),
            }
        ),
        400,
    )


@projection_bp.errorhandler(ShareCodecError)
def handle_share_codec_error(error: ShareCodecError) -> Any:
    return jsonify({"error": "Invalid share token", "message": str(error)}), 400


@projection_bp.errorhandler(StorageError)
def handle_storage_error(error: StorageError) -> Any:
    current_app.logger.error(f"Storage failure: {str(error)}")
    return jsonify({"error": "Storage failure"}), 500


@projection_bp.route("/profiles/default", methods=["GET"])
def default_profile() -> Any:
    """Profile built from the configured defaults."""
    settings = _settings()
    profile = Profile(
        annual_income=settings.default_annual_income,
        initial_savings=settings.default_initial_savings,
        savings_rate=settings.default_savings_rate,
    )
    return jsonify(_dump_profile(profile))


@projection_bp.route("/projections/balance", methods=["POST"])
def balance() -> Any:
    """Terminal net worth for one horizon and return rate."""
    query = ProjectionRequest.model_validate(_body())
    result = project_balance(query.profile, query.years, query.return_rate)
    return jsonify(
        {"years": query.years, "returnRate": query.return_rate, "balance": result}
    )


@projection_bp.route("/projections/trajectory", methods=["POST"])
def trajectory() -> Any:
    """Year-by-year records from year 0 to the horizon."""
    query = ProjectionRequest.model_validate(_body())
    records = project_trajectory(query.profile, query.years, query.return_rate)
    return jsonify(
        {
            "years": query.years,
            "returnRate": query.return_rate,
            "records": [
                record.model_dump(mode="json", by_alias=True) for record in records
            ],
        }
    )


@projection_bp.route("/projections/matrix", methods=["POST"])
def matrix() -> Any:
    """Terminal balances for every configured horizon and return rate."""
    settings = _settings()
    query = MatrixRequest.model_validate(_body())
    projection_matrix = build_projection_matrix(
        query.profile,
        query.year_options or settings.year_options,
        query.return_rate_options or settings.return_rate_options,
        green_threshold=settings.green_threshold,
        yellow_threshold=settings.yellow_threshold,
    )
    return jsonify(
        {
            "yearOptions": projection_matrix.year_options,
            "returnRateOptions": projection_matrix.return_rate_options,
            "rows": projection_matrix.to_rows(),
        }
    )


@projection_bp.route("/profiles/effective-values", methods=["POST"])
def effective_values() -> Any:
    """Income, savings rate and contribution in effect for one year."""
    query = EffectiveValuesRequest.model_validate(_body())
    return jsonify(
        {
            "year": query.year,
            "income": resolve_effective_value(query.profile, query.year, "income"),
            "savingsRate": resolve_effective_value(
                query.profile, query.year, "savings_rate"
            ),
            "contribution": preview_contribution(query.profile, query.year),
            "savingsRateExceedsIncome": savings_rate_exceeds_income(
                query.profile, query.year
            ),
        }
    )


@projection_bp.route("/mortgages/schedule", methods=["POST"])
def mortgage_schedule() -> Any:
    """Amortization schedule of a mortgage on its own."""
    query = ScheduleRequest.model_validate(_body())
    schedule = MortgageCalculator.generate_yearly_schedule(
        query.principal, query.interest_rate, query.mortgage_term
    )
    payload = schedule.model_dump()
    payload["total_paid"] = schedule.total_paid
    payload["total_interest"] = schedule.total_interest
    return jsonify(payload)


@projection_bp.route("/share", methods=["POST"])
def create_share_token() -> Any:
    """Encode the posted profile as a share token."""
    profile = Profile.model_validate(_body())
    return jsonify({"token": encode_profile(profile)}), 201


@projection_bp.route("/share/<token>", methods=["GET"])
def read_share_token(token: str) -> Any:
    """Decode a share token back into its profile."""
    return jsonify(_dump_profile(decode_profile(token)))


@projection_bp.route("/state", methods=["GET"])
def load_state() -> Any:
    """Return the saved profile."""
    profile = _profile_store().load()
    if profile is None:
        return jsonify({"error": "No saved state"}), 404
    return jsonify(_dump_profile(profile))


@projection_bp.route("/state", methods=["PUT"])
def save_state() -> Any:
    """Replace the saved profile."""
    profile = Profile.model_validate(_body())
    _profile_store().save(profile)
    return jsonify(_dump_profile(profile))


@projection_bp.route("/state", methods=["DELETE"])
def clear_state() -> Any:
    """Forget the saved profile."""
    deleted = _profile_store().clear()
    return jsonify({"deleted": deleted})
