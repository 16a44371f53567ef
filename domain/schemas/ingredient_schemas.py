from pydantic import BaseModel, Field
from typing import Optional, List


class Ingredient(BaseModel):
    """Shopping list entry as seen by callers of the repository and service"""

    id: str = Field(..., min_length=1, description="Caller-assigned unique identifier")
    name: str = Field(..., description="Display text")
    completed: bool = Field(default=False, description="Whether the entry is checked off")
    created_at: Optional[int] = Field(
        None, ge=0, description="Creation time in epoch milliseconds; filled on add if omitted"
    )
    updated_at: Optional[int] = Field(
        None, ge=0, description="Last modification time in epoch milliseconds"
    )

    model_config = {"from_attributes": True}


class LegacyIngredient(Ingredient):
    """Entry read from the pre-SQLite key-value store; extra keys are ignored"""

    model_config = {"from_attributes": True, "extra": "ignore"}


class IngredientCreateRequest(BaseModel):
    """Schema for adding an entry through the API"""

    name: str = Field(..., description="Entry name; must not be blank")


class IngredientUpdateRequest(BaseModel):
    """Partial update; omitted fields are left untouched"""

    name: Optional[str] = Field(None, description="New name")
    completed: Optional[bool] = Field(None, description="New completion state")


class IngredientReorderRequest(BaseModel):
    """Desired order of entry ids"""

    ordered_ids: List[str] = Field(default_factory=list)
