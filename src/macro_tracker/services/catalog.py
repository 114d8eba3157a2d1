"""Food catalog validation, ranking and usage bookkeeping."""

import logging
import math
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID, uuid4

from macro_tracker.domain.errors import ValidationError
from macro_tracker.domain.foods import Food, FoodDraft

_logger = logging.getLogger(__name__)

_MACRO_FIELDS = ("protein_g", "carbs_g", "fat_g")
_EDITABLE_FIELDS = ("name", "portion_size", *_MACRO_FIELDS)


class FoodRepository(Protocol):
    """Persistence interface for catalog foods."""

    def list_foods(self, user_id: UUID) -> list[Food]:
        """Return the user's foods in creation order."""

    def get_food(self, user_id: UUID, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""

    def create_food(self, user_id: UUID, food: Food) -> Food:
        """Persist a new food and return it."""

    def update_food(self, user_id: UUID, food: Food) -> Food:
        """Persist edited fields of a food and return it."""

    def delete_food(self, user_id: UUID, food_id: UUID) -> None:
        """Delete a food."""

    def increment_frequency(self, food_id: UUID) -> None:
        """Atomically add one to a food's frequency."""


def ranked_view(foods: list[Food]) -> list[Food]:
    """Sort foods by frequency, most used first; ties keep their order."""
    return sorted(foods, key=lambda food: food.frequency, reverse=True)


def record_usage(foods: list[Food], food_id: UUID) -> list[Food]:
    """Return the catalog with one food's frequency increased by one."""
    return [
        replace(food, frequency=food.frequency + 1) if food.id == food_id else food
        for food in foods
    ]


def delete_food(foods: list[Food], food_id: UUID) -> list[Food]:
    """Return the catalog without the given food."""
    return [food for food in foods if food.id != food_id]


def validate_draft(draft: FoodDraft) -> None:
    """Raise ValidationError listing every invalid field of a draft."""
    errors: dict[str, str] = {}
    if not isinstance(draft.name, str) or not draft.name.strip():
        errors["name"] = "Food name is required"
    if not isinstance(draft.portion_size, str) or not draft.portion_size.strip():
        errors["portion_size"] = "Portion size is required"
    valid_macros = True
    for field_name in _MACRO_FIELDS:
        value = getattr(draft, field_name)
        if isinstance(value, bool) or not isinstance(value, int | float):
            errors[field_name] = "Must be a number"
            valid_macros = False
        elif not math.isfinite(value):
            errors[field_name] = "Must be finite"
            valid_macros = False
        elif value < 0:
            errors[field_name] = "Cannot be negative"
            valid_macros = False
    if valid_macros and not any(getattr(draft, name) > 0 for name in _MACRO_FIELDS):
        errors["macros"] = "At least one macro must be greater than 0"
    if errors:
        raise ValidationError(errors)


def create_food(draft: FoodDraft) -> Food:
    """Validate a draft and turn it into a new catalog food."""
    validate_draft(draft)
    return Food(
        id=uuid4(),
        name=draft.name.strip(),
        portion_size=draft.portion_size.strip(),
        protein_g=float(draft.protein_g),
        carbs_g=float(draft.carbs_g),
        fat_g=float(draft.fat_g),
        frequency=0,
    )


def edit_food(food: Food, patch: dict[str, object]) -> Food:
    """Apply a patch to a food, re-validating it. Frequency is left alone."""
    unknown = sorted(set(patch) - set(_EDITABLE_FIELDS))
    if unknown:
        raise ValidationError({name: "Field cannot be edited" for name in unknown})
    draft = FoodDraft(
        name=patch.get("name", food.name),
        portion_size=patch.get("portion_size", food.portion_size),
        protein_g=patch.get("protein_g", food.protein_g),
        carbs_g=patch.get("carbs_g", food.carbs_g),
        fat_g=patch.get("fat_g", food.fat_g),
    )
    validate_draft(draft)
    return replace(
        food,
        name=draft.name.strip(),
        portion_size=draft.portion_size.strip(),
        protein_g=float(draft.protein_g),
        carbs_g=float(draft.carbs_g),
        fat_g=float(draft.fat_g),
    )


@dataclass
class CatalogService:
    """Application service for the user's food catalog."""

    repository: FoodRepository

    def list_foods(self, user_id: UUID) -> list[Food]:
        """Return the catalog in creation order."""
        return self.repository.list_foods(user_id)

    def list_ranked(self, user_id: UUID) -> list[Food]:
        """Return the catalog in display order."""
        return ranked_view(self.repository.list_foods(user_id))

    def get_food(self, user_id: UUID, food_id: UUID) -> Food | None:
        """Return a live food, if it still exists."""
        return self.repository.get_food(user_id, food_id)

    def create(self, user_id: UUID, draft: FoodDraft) -> Food:
        """Validate and persist a new food."""
        food = self.repository.create_food(user_id, create_food(draft))
        _logger.info("Food created: user_id=%s food_id=%s", user_id, food.id)
        return food

    def update(
        self, user_id: UUID, food_id: UUID, patch: dict[str, object]
    ) -> Food | None:
        """Edit a food. Entries already logged keep their copied values."""
        current = self.repository.get_food(user_id, food_id)
        if current is None:
            return None
        edited = edit_food(current, patch)
        food = self.repository.update_food(user_id, edited)
        _logger.info("Food updated: user_id=%s food_id=%s", user_id, food_id)
        return food

    def delete(self, user_id: UUID, food_id: UUID) -> list[Food]:
        """Delete a food and return the remaining catalog in display order."""
        foods = self.repository.list_foods(user_id)
        if not any(food.id == food_id for food in foods):
            _logger.warning(
                "Delete of unknown food: user_id=%s food_id=%s", user_id, food_id
            )
            return ranked_view(foods)
        self.repository.delete_food(user_id, food_id)
        _logger.info("Food deleted: user_id=%s food_id=%s", user_id, food_id)
        return ranked_view(delete_food(foods, food_id))

    def record_use(self, foods: list[Food], food_id: UUID) -> list[Food]:
        """Count one use of a food and return the re-ranked catalog.

        A food that is no longer in the catalog is skipped.
        """
        if not any(food.id == food_id for food in foods):
            _logger.warning("Usage of unknown food skipped: food_id=%s", food_id)
            return ranked_view(foods)
        self.repository.increment_frequency(food_id)
        return ranked_view(record_usage(foods, food_id))
