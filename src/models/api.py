from typing import Optional

from pydantic import Field

from models import (
    DrawOptions,
    DrawResult,
    EquipmentValuation,
    MaterialGrade,
    SpellItemType,
)
from models.base_model import LootgenBaseModel
from models.filters import AppFilter
from models.sources import AnySource


class PackSnapshot(LootgenBaseModel):
    # compendium contents the draw may need, {pack id: [document, ...]}
    packs: dict[str, list[dict]] = {}


class DrawRequest(PackSnapshot):
    count: int = Field(ge=0)
    sources: list[AnySource]
    options: DrawOptions = DrawOptions()


class LootPlan(PackSnapshot):
    count: int = Field(default=1, ge=0)
    control: bool = False
    shift: bool = False
    sources: list[AnySource]
    filters: list[AppFilter] = []
    spellItemTypes: list[SpellItemType] = Field(
        default=[SpellItemType.scroll, SpellItemType.wand], min_length=1
    )
    existingItems: list[dict] = []
    compareValues: bool = False
    displayChat: bool = False


class LootOutcome(LootgenBaseModel):
    draws: list[DrawResult] = []
    items: list[dict] = []
    updates: list[dict] = []
    chat: Optional[dict] = None
    notifications: list[dict] = []


class MergeRequest(LootgenBaseModel):
    existingItems: list[dict] = []
    newItems: list[dict]
    compareValues: bool = False


class MergeResponse(LootgenBaseModel):
    existingItems: list[dict]
    newItems: list[dict]


class EquipmentChoices(LootgenBaseModel):
    item: dict
    materialType: Optional[str] = None
    materialGrade: Optional[MaterialGrade] = None
    potencyRune: int = 0
    fundamentalRune: Optional[str] = None
    propertyRunes: list[str] = Field(default=["", "", "", ""], max_length=4)


class BuildRequest(EquipmentChoices):
    checks: bool = True


class BuildResponse(LootgenBaseModel):
    item: dict
    valuation: EquipmentValuation
