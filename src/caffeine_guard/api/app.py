"""FastAPI application factory."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from caffeine_guard.api.models import LogRequest, PreferencesUpdate, VerdictRequest
from caffeine_guard.app_logging import configure_logging
from caffeine_guard.containers import AppContainer
from caffeine_guard.domain.caffeine import (
    CaffeineStatus,
    ConsumptionEntry,
    EnergyLevel,
    Guidance,
    Verdict,
    round_half_up,
)
from caffeine_guard.domain.catalog import (
    DRINK_CATALOG,
    UnknownDrinkError,
    drinks_in_category,
    get_drink,
)
from caffeine_guard.domain.drinks import Drink, DrinkCategory
from caffeine_guard.services.decay import milestones


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(ValueError)
    async def invalid_input(_request: Request, exc: ValueError) -> JSONResponse:
        logger.info("Rejected request: %s", exc)
        if isinstance(exc, ValidationError):
            detail: object = jsonable_encoder(
                exc.errors(include_url=False, include_context=False)
            )
        else:
            detail = str(exc)
        return JSONResponse(status_code=422, content={"detail": detail})

    @app.exception_handler(UnknownDrinkError)
    async def unknown_drink(_request: Request, exc: UnknownDrinkError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.args[0]}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/drinks")
    async def list_drinks(category: DrinkCategory | None = None) -> dict[str, object]:
        """Return the drink catalog, optionally for one category."""
        drinks = DRINK_CATALOG if category is None else drinks_in_category(category)
        return {"drinks": [_drink_payload(drink) for drink in drinks]}

    @app.get("/drinks/{drink_id}")
    async def drink_detail(drink_id: str) -> dict[str, object]:
        """Return a single catalog drink."""
        return _drink_payload(get_drink(drink_id))

    @app.post("/verdict")
    async def verdict(payload: VerdictRequest, request: Request) -> dict[str, object]:
        """Return the sleep verdict for drinking a catalog drink now."""
        state_container: AppContainer = request.app.state.container
        dose, result = state_container.tracker_service.verdict_for(
            payload.drink_id,
            now=state_container.clock(),
            size_oz=payload.size_oz,
            shots=payload.shots,
            hours_until_bed=payload.hours_until_bed,
        )
        half_life = state_container.preferences_service.load().half_life_hours
        return {
            "effective_dose_mg": dose,
            "verdict": _verdict_payload(result),
            "milestones": [
                {
                    "label": milestone.label,
                    "hours": milestone.hours,
                    "remaining_mg": round_half_up(milestone.remaining_mg),
                }
                for milestone in milestones(dose, half_life)
            ],
        }

    @app.get("/status")
    async def caffeine_status(request: Request) -> dict[str, object]:
        """Return the current caffeine status with guidance."""
        state_container: AppContainer = request.app.state.container
        snapshot = state_container.tracker_service.get_status(state_container.clock())
        return _status_payload(snapshot)

    @app.get("/recommendations")
    async def recommendations(
        request: Request, energy: EnergyLevel | None = None, max_results: int = 3
    ) -> dict[str, object]:
        """Return drink suggestions for now; an empty list means none fit."""
        state_container: AppContainer = request.app.state.container
        drinks = state_container.tracker_service.recommend(
            state_container.clock(), energy=energy, max_results=max_results
        )
        return {"drinks": [_drink_payload(drink) for drink in drinks]}

    @app.post("/logs", status_code=status.HTTP_201_CREATED)
    async def log_drink(payload: LogRequest, request: Request) -> dict[str, object]:
        """Log a consumed drink."""
        state_container: AppContainer = request.app.state.container
        consumed_at = _as_aware(payload.consumed_at or state_container.clock())
        service = state_container.consumption_service
        if payload.drink_id is not None:
            entry = service.log_drink(
                payload.drink_id,
                consumed_at=consumed_at,
                size_oz=payload.size_oz,
                shots=payload.shots,
                notes=payload.notes,
            )
        else:
            entry = service.log_custom(
                name=payload.name or "",
                caffeine_mg=payload.caffeine_mg or 0.0,
                consumed_at=consumed_at,
                notes=payload.notes,
            )
        return _entry_payload(entry)

    @app.get("/logs")
    async def list_logs(request: Request, days: int = 7) -> dict[str, object]:
        """Return logged drinks from the last few days, newest first."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.consumption_service.list_entries(
            state_container.clock(), days=days
        )
        return {"logs": [_entry_payload(entry) for entry in reversed(entries)]}

    @app.get("/logs/stats")
    async def log_stats(request: Request) -> dict[str, object]:
        """Return consumption totals."""
        state_container: AppContainer = request.app.state.container
        prefs = state_container.preferences_service.load()
        stats = state_container.consumption_service.get_stats(
            state_container.clock(), prefs.timezone
        )
        return {
            "total_today_mg": stats.total_today_mg,
            "total_week_mg": stats.total_week_mg,
            "total_month_mg": stats.total_month_mg,
            "drinks_today": stats.drinks_today,
            "drinks_week": stats.drinks_week,
            "drinks_month": stats.drinks_month,
            "average_per_day_mg": stats.average_per_day_mg,
            "most_consumed": stats.most_consumed,
            "last_consumed_at": (
                stats.last_consumed_at.isoformat() if stats.last_consumed_at else None
            ),
        }

    @app.delete("/logs/{entry_id}")
    async def delete_log(entry_id: UUID, request: Request) -> dict[str, str]:
        """Delete a logged drink."""
        state_container: AppContainer = request.app.state.container
        if not state_container.consumption_service.delete_entry(entry_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"status": "deleted"}

    @app.get("/preferences")
    async def get_preferences(request: Request) -> dict[str, object]:
        """Return current preferences."""
        state_container: AppContainer = request.app.state.container
        return state_container.preferences_service.load().model_dump()

    @app.put("/preferences")
    async def update_preferences(
        payload: PreferencesUpdate, request: Request
    ) -> dict[str, object]:
        """Update preferences."""
        state_container: AppContainer = request.app.state.container
        updated = state_container.preferences_service.update(
            **payload.model_dump(exclude_none=True)
        )
        return updated.model_dump()

    @app.post("/preferences/reset")
    async def reset_preferences(request: Request) -> dict[str, object]:
        """Restore default preferences."""
        state_container: AppContainer = request.app.state.container
        return state_container.preferences_service.reset().model_dump()

    return app


def _as_aware(value: datetime) -> datetime:
    """Treat naive timestamps as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _drink_payload(drink: Drink) -> dict[str, object]:
    return {
        "id": drink.id,
        "name": drink.name,
        "category": drink.category.value,
        "caffeine_mg": drink.caffeine_mg,
        "description": drink.description,
        "tags": sorted(tag.value for tag in drink.tags),
    }


def _verdict_payload(verdict: Verdict) -> dict[str, object]:
    return {
        "code": verdict.code.value,
        "chip": verdict.chip,
        "headline": verdict.headline,
        "detail": verdict.detail,
        "suggestion": verdict.suggestion,
        "remaining_mg": verdict.rounded_remaining_mg,
        "hours_until_bed": round(verdict.hours_until_bed, 1),
    }


def _guidance_payload(guidance: Guidance) -> dict[str, object]:
    return {
        "state": guidance.state.value,
        "color": guidance.color.value,
        "headline": guidance.headline,
        "message": guidance.message,
        "projected_at_bedtime": guidance.projected_at_bedtime,
        "wait_time": guidance.wait_time,
        "can_have_caffeine": guidance.can_have_caffeine,
    }


def _status_payload(snapshot: CaffeineStatus) -> dict[str, object]:
    return {
        "as_of": snapshot.as_of.isoformat(),
        "current_level_mg": snapshot.current_level_mg,
        "peak_level_mg": snapshot.peak_level_mg,
        "consumed_today_mg": snapshot.consumed_today_mg,
        "daily_limit_mg": snapshot.daily_limit_mg,
        "daily_progress_pct": round(snapshot.daily_progress_pct, 1),
        "hours_until_bed": round(snapshot.hours_until_bed, 1),
        "cutoff_time": snapshot.cutoff_time,
        "guidance": _guidance_payload(snapshot.guidance),
    }


def _entry_payload(entry: ConsumptionEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "drink_id": entry.drink_id,
        "drink_name": entry.drink_name,
        "caffeine_mg": entry.caffeine_mg,
        "consumed_at": entry.consumed_at.isoformat(),
        "size_oz": entry.size_oz,
        "shots": entry.shots,
        "notes": entry.notes,
    }
