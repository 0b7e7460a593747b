from enum import Enum
from typing import Optional

from pydantic import Field

from models.base_model import LootgenBaseModel
from models.sources import AnySource


class EquipmentType(str, Enum):
    weapon = "weapon"
    armor = "armor"
    buckler = "buckler"
    shield = "shield"
    tower = "tower"

    @property
    def is_shield(self) -> bool:
        return self in SHIELD_TYPES


SHIELD_TYPES = frozenset(
    [EquipmentType.buckler, EquipmentType.shield, EquipmentType.tower]
)


class MaterialGrade(str, Enum):
    low = "low"
    standard = "standard"
    high = "high"


class SpellItemType(str, Enum):
    scroll = "scroll"
    wand = "wand"


class DocumentRef(LootgenBaseModel):
    packId: str
    documentId: str


class TableRoll(LootgenBaseModel):
    resultRef: Optional[DocumentRef] = None
    rawResult: dict = {}


class DrawResult(LootgenBaseModel):
    itemData: dict
    source: AnySource

    def to_dict(self):
        result = super().to_dict()
        # a pool is sent back as a reference, not with every record it holds
        result["source"].pop("elements", None)
        return result


class DrawOptions(LootgenBaseModel):
    displayChat: bool = False
    maxRetries: int = Field(default=10, ge=0)


class EquipmentValuation(LootgenBaseModel):
    level: int = 0
    price: float = 0
    hardness: int = 0
    hitPoints: int = 0
    brokenThreshold: int = 0
