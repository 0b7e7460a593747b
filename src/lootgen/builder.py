from abc import ABC, abstractmethod
from copy import deepcopy
from typing import Optional

from lootgen import LootgenException
from lootgen.pricing import (
    calculate_final_price_and_level,
    format_price,
    get_equipment_type,
)
from models import EquipmentType, EquipmentValuation, MaterialGrade
from pf2e import CREATE_KEY_NONE
from pf2e.materials import materials_of_type
from pf2e.runes import ITEM_RUNES
from utils import set_path, random_id, getLogger

logger = getLogger(__name__)

PROPERTY_RUNE_SLOTS = 4
MAX_POTENCY = 4


class ItemBuilderException(LootgenException):
    status_code = 422


class ItemBuilder(ABC):
    """
    Builds a finished weapon, armor or shield out of a base item. Setters
    validate before they store anything, so a rejected call leaves the builder
    as it was. Use `make_builder` to get the right subclass for an item.
    """

    fundamental_path: str

    def __init__(self, base_item: dict):
        self.base_item = deepcopy(base_item)
        self.equipment_type: EquipmentType = get_equipment_type(base_item)
        self.checks_enabled = True
        self.reset()

    @property
    @abstractmethod
    def builder_type(self) -> EquipmentType: ...

    @property
    def valid_materials(self) -> dict:
        return materials_of_type([self.equipment_type.value])

    @property
    def valid_runes(self) -> dict:
        return ITEM_RUNES[self.builder_type.value]

    def set_checks(self, enabled: bool):
        self.checks_enabled = enabled
        return self

    def reset(self):
        self.potency = 0
        self.potency_set = False
        self.fundamental: Optional[str] = None
        self.material_slug: Optional[str] = None
        self.material_grade: Optional[MaterialGrade] = None
        self.property_slugs = [""] * PROPERTY_RUNE_SLOTS
        return self

    def set_material(self, slug: str, grade: MaterialGrade | str | None = None):
        material = self.valid_materials.get(slug)
        if self.checks_enabled and material is None:
            raise ItemBuilderException(
                f'Specified material "{slug}" is not a valid material '
                f"for this item type."
            )
        if grade is None and material is not None:
            grade = material["defaultGrade"]
        if grade is not None:
            try:
                grade = MaterialGrade(grade)
            except ValueError:
                raise ItemBuilderException(
                    f'Unknown material grade "{grade}".'
                ) from None

        category = self.equipment_type.value
        if self.checks_enabled and grade.value not in material[category]:
            raise ItemBuilderException(
                f'Material "{slug}" has no {grade.value} grade for this item type.'
            )

        self.material_slug = slug
        self.material_grade = grade
        return self

    def set_potency(self, value: int):
        if self.checks_enabled and not 0 <= value <= MAX_POTENCY:
            raise ItemBuilderException(
                f"Potency value must be >= 0 and <= {MAX_POTENCY}, "
                f'but "{value}" was provided.'
            )
        self.potency = value
        self.potency_set = True
        return self

    def set_fundamental(self, slug: str):
        if self.checks_enabled:
            if not self.potency_set:
                raise ItemBuilderException(
                    "Potency must be set before setting fundamental."
                )
            if slug not in self.valid_runes["fundamental"]:
                raise ItemBuilderException(
                    f"{slug} is not a valid fundamental value for this item type."
                )
        self.fundamental = slug
        return self

    def set_property_rune(self, index: int, slug: str):
        if not 0 <= index < PROPERTY_RUNE_SLOTS:
            raise ItemBuilderException(
                f"Property rune slot must be between 0 and {PROPERTY_RUNE_SLOTS - 1}, "
                f"got {index}."
            )
        if self.checks_enabled and slug:
            if not self.potency_set:
                raise ItemBuilderException(
                    "Potency must be set before setting property runes."
                )
            if index >= self.potency:
                raise ItemBuilderException(
                    f"A potency {self.potency} item has only "
                    f"{self.potency} property rune slots."
                )
            if slug not in self.valid_runes["property"]:
                raise ItemBuilderException(
                    f"{slug} is not a valid property rune for this item type."
                )
        self.property_slugs[index] = slug or ""
        return self

    def valuation(self) -> EquipmentValuation:
        return calculate_final_price_and_level(
            self.base_item,
            material_type=self.material_slug,
            material_grade=self.material_grade,
            potency_rune=self.potency,
            fundamental_rune=self.fundamental,
            property_runes=self.property_slugs,
        )

    def build(self) -> dict:
        item = deepcopy(self.base_item)
        item["_id"] = random_id()

        set_path(item, "data.preciousMaterial.value", self.material_slug)
        set_path(
            item,
            "data.preciousMaterialGrade.value",
            self.material_grade.value if self.material_grade else None,
        )
        set_path(
            item, "data.potencyRune.value", self.potency if self.potency_set else None
        )
        for i, slug in enumerate(self.property_slugs):
            set_path(item, f"data.propertyRune{i + 1}.value", slug)
        set_path(
            item,
            self.fundamental_path,
            None if self.fundamental == CREATE_KEY_NONE else self.fundamental,
        )

        valuation = self.valuation()
        set_path(item, "data.level.value", valuation.level)
        set_path(item, "data.price.value", format_price(valuation.price))
        if self.equipment_type.is_shield:
            set_path(item, "data.hardness.value", valuation.hardness)
            set_path(item, "data.hp.value", valuation.hitPoints)
            set_path(item, "data.hp.max", valuation.hitPoints)
            set_path(item, "data.brokenThreshold.value", valuation.brokenThreshold)

        logger.debug(f"Built {item.get('name')} at level {valuation.level}")
        return item


class WeaponBuilder(ItemBuilder):
    builder_type = EquipmentType.weapon
    fundamental_path = "data.strikingRune.value"

    def set_striking_rune(self, slug: str):
        return self.set_fundamental(slug)


class ArmorBuilder(ItemBuilder):
    builder_type = EquipmentType.armor
    fundamental_path = "data.resiliencyRune.value"

    def set_resiliency_rune(self, slug: str):
        return self.set_fundamental(slug)


class ShieldBuilder(ArmorBuilder):
    @property
    def builder_type(self) -> EquipmentType:
        return self.equipment_type


def make_builder(base_item: dict) -> ItemBuilder:
    match get_equipment_type(base_item):
        case EquipmentType.weapon:
            return WeaponBuilder(base_item)
        case EquipmentType.armor:
            return ArmorBuilder(base_item)
        case EquipmentType.buckler | EquipmentType.shield | EquipmentType.tower:
            return ShieldBuilder(base_item)
    raise ItemBuilderException(
        f"Cannot build from {base_item.get('name')!r} "
        f"of type {base_item.get('type')!r}."
    )
