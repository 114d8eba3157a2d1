"""Tracker API endpoints for the authenticated user."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import (
    APIRouter,
    Depends,
    Header,
    HTTPException,
    Query,
    Request,
    status,
)

from macro_tracker.api.models import (  # noqa: TC001
    DayTypePayload,
    FoodPatchPayload,
    FoodPayload,
    LogFoodPayload,
    MultiplierPayload,
    SettingsPayload,
)
from macro_tracker.domain.foods import FoodDraft
from macro_tracker.domain.macros import Targets, UserSettings
from macro_tracker.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(tags=["tracker"])


async def require_user(
    request: Request, authorization: str | None = Header(default=None)
) -> UserRecord:
    """Resolve the bearer token to the current user."""
    container: AppContainer = request.app.state.container
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization[len("bearer ") :]
    user = container.user_service.authenticate(token)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user


@router.get("/foods")
async def list_foods(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the catalog, most used first."""
    container: AppContainer = request.app.state.container
    return {"foods": container.catalog_service.list_ranked(user.id)}


@router.post("/foods", status_code=status.HTTP_201_CREATED)
async def create_food(
    payload: FoodPayload, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Add a food to the catalog."""
    container: AppContainer = request.app.state.container
    food = container.catalog_service.create(user.id, FoodDraft(**payload.model_dump()))
    return {"food": food}


@router.patch("/foods/{food_id}")
async def update_food(
    food_id: UUID,
    payload: FoodPatchPayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Edit a catalog food."""
    container: AppContainer = request.app.state.container
    food = container.catalog_service.update(
        user.id, food_id, payload.model_dump(exclude_unset=True)
    )
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"food": food}


@router.delete("/foods/{food_id}")
async def delete_food(
    food_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Remove a food from the catalog. Logged entries are kept."""
    container: AppContainer = request.app.state.container
    return {"foods": container.catalog_service.delete(user.id, food_id)}


@router.get("/days/today")
async def today(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return today's summary in the user's local timezone."""
    container: AppContainer = request.app.state.container
    service = container.day_log_service
    return {"day": service.get_summary(user.id, service.today(user.id))}


@router.get("/days/{day}")
async def day_summary(
    day: date, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the summary for a date."""
    container: AppContainer = request.app.state.container
    return {"day": container.day_log_service.get_summary(user.id, day)}


@router.post("/days/{day}/entries", status_code=status.HTTP_201_CREATED)
async def log_food(
    day: date,
    payload: LogFoodPayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Log a catalog food on a date."""
    container: AppContainer = request.app.state.container
    result = container.day_log_service.log_food(
        user.id, day, payload.food_id, payload.multiplier
    )
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"day": result.day, "entry": result.entry, "foods": result.foods}


@router.put("/days/{day}/day-type")
async def set_day_type(
    day: date,
    payload: DayTypePayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Switch a date between workout and rest targets."""
    container: AppContainer = request.app.state.container
    summary = container.day_log_service.set_day_type(user.id, day, payload.day_type)
    return {"day": summary}


@router.patch("/entries/{entry_id}")
async def update_entry(
    entry_id: UUID,
    payload: MultiplierPayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Change a logged entry's multiplier."""
    container: AppContainer = request.app.state.container
    summary = container.day_log_service.update_multiplier(
        user.id,
        entry_id,
        payload.multiplier,
        remove_if_nonpositive=payload.remove_if_nonpositive,
    )
    if summary is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"day": summary}


@router.delete("/entries/{entry_id}")
async def delete_entry(
    entry_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Remove a logged entry from its day."""
    container: AppContainer = request.app.state.container
    summary = container.day_log_service.remove_entry(user.id, entry_id)
    if summary is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"day": summary}


@router.get("/history")
async def history(
    request: Request,
    limit: int | None = Query(default=None, ge=1),
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Return recent days with totals against their own targets."""
    container: AppContainer = request.app.state.container
    if limit is None:
        limit = container.settings.history_days
    return {"days": container.day_log_service.history(user.id, limit)}


@router.get("/settings")
async def get_settings(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the user's targets."""
    container: AppContainer = request.app.state.container
    return {"settings": container.user_settings_service.get_settings(user.id)}


@router.put("/settings")
async def update_settings(
    payload: SettingsPayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Replace the user's targets and timezone."""
    container: AppContainer = request.app.state.container
    settings = container.user_settings_service.update_settings(
        user.id,
        UserSettings(
            workout=Targets(**payload.workout.model_dump()),
            rest=Targets(**payload.rest.model_dump()),
            timezone=payload.timezone,
        ),
    )
    return {"settings": settings}
