"""Supabase implementation for the food catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from macro_tracker.domain.foods import Food
from macro_tracker.services.catalog import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for catalog foods."""

    client: Client

    def list_foods(self, user_id: UUID) -> list[Food]:
        """Return the user's foods in creation order."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at")
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, user_id: UUID, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", str(food_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def create_food(self, user_id: UUID, food: Food) -> Food:
        """Insert a food row and return it."""
        response = (
            self.client.table("foods")
            .insert(
                {
                    "id": str(food.id),
                    "user_id": str(user_id),
                    "frequency": food.frequency,
                    **_food_payload(food),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food")
        return _parse_food(response.data[0])

    def update_food(self, user_id: UUID, food: Food) -> Food:
        """Update the editable columns of a food row."""
        response = (
            self.client.table("foods")
            .update(_food_payload(food))
            .eq("id", str(food.id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food")
        return _parse_food(response.data[0])

    def delete_food(self, user_id: UUID, food_id: UUID) -> None:
        """Delete a food row."""
        self.client.table("foods").delete().eq("id", str(food_id)).eq(
            "user_id", str(user_id)
        ).execute()

    def increment_frequency(self, food_id: UUID) -> None:
        """Increment the frequency counter server-side."""
        self.client.rpc(
            "increment_food_frequency", {"food_id": str(food_id)}
        ).execute()


def _food_payload(food: Food) -> dict[str, object]:
    return {
        "name": food.name,
        "portion_size": food.portion_size,
        "protein": food.protein_g,
        "carbs": food.carbs_g,
        "fat": food.fat_g,
    }


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a food row into a domain model."""
    return Food(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        portion_size=str(row.get("portion_size", "")),
        protein_g=float(row.get("protein", 0.0)),
        carbs_g=float(row.get("carbs", 0.0)),
        fat_g=float(row.get("fat", 0.0)),
        frequency=int(row.get("frequency", 0)),
    )
