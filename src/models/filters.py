from enum import Enum

from pydantic import Field

from models.base_model import LootgenBaseModel
from models.sources import GenType


class FilterType(str, Enum):
    school = "school"
    level = "level"
    tradition = "tradition"
    rarity = "rarity"


class AppFilter(LootgenBaseModel):
    id: str = Field(min_length=1)
    name: str = ""
    weight: float = Field(default=1, ge=0)
    enabled: bool = True
    filterType: FilterType
    filterCategory: GenType
    desiredValue: int | str | bool
