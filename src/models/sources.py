from enum import Enum
from typing import Optional, Literal, Annotated, Union, Any

from pydantic import Field, Tag, Discriminator

from models.base_model import LootgenBaseModel


class SourceType(str, Enum):
    table = "table"
    pack = "pack"
    pool = "pool"


class GenType(str, Enum):
    treasure = "treasure"
    permanent = "permanent"
    consumable = "consumable"
    spell = "spell"


class Denomination(str, Enum):
    copper = "cp"
    silver = "sp"
    gold = "gp"
    platinum = "pp"


class DataSource(LootgenBaseModel):
    id: Optional[str] = None
    storeId: Optional[str] = None
    name: str = ""
    sourceType: SourceType
    itemType: Optional[GenType] = None
    weight: float = Field(default=1, ge=0)
    enabled: bool = True


class PackSource(DataSource):
    # id is the compendium pack id
    id: str = Field(min_length=1)
    sourceType: Literal[SourceType.pack] = SourceType.pack


class TableSource(DataSource):
    # id is the rollable table id, tableSource is the pack holding the table
    id: str = Field(min_length=1)
    sourceType: Literal[SourceType.table] = SourceType.table
    tableSource: PackSource


class TreasureSource(TableSource):
    value: str = Field(min_length=1)
    denomination: Denomination = Denomination.gold


class PoolSource(DataSource):
    id: None = None
    sourceType: Literal[SourceType.pool] = SourceType.pool
    elements: list[dict] = []


def _source_tag(v: Any) -> str | None:
    if isinstance(v, dict):
        source_type = v.get("sourceType")
        is_treasure = "value" in v
    else:
        source_type = getattr(v, "sourceType", None)
        is_treasure = isinstance(v, TreasureSource)

    source_type = getattr(source_type, "value", source_type)
    if source_type == SourceType.table.value and is_treasure:
        return "treasure"
    return source_type


AnySource = Annotated[
    Union[
        Annotated[TreasureSource, Tag("treasure")],
        Annotated[TableSource, Tag("table")],
        Annotated[PackSource, Tag("pack")],
        Annotated[PoolSource, Tag("pool")],
    ],
    Discriminator(_source_tag),
]
