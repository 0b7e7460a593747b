import math
import re
from typing import Optional, Sequence

from models import EquipmentType, EquipmentValuation, MaterialGrade
from pf2e.materials import material_entry
from pf2e.runes import rune_entry
from utils import get_path, getLogger

logger = getLogger(__name__)

DENOMINATION_IN_GP = {"cp": 0.01, "sp": 0.1, "gp": 1, "pp": 10}
LIGHT_BULK = 0.1

_price_part = re.compile(r"([\d,.]+)\s*(cp|sp|gp|pp)?", re.IGNORECASE)


def parse_price(price) -> float:
    """
    Convert a Foundry price into gold pieces.
    :param price: `"10 gp"`, `"1,600 gp"`, `"5 sp 3 cp"`, a bare number or a
        `{"gp": 10, "sp": 5}` mapping
    """
    if price is None or price == "":
        return 0
    if isinstance(price, bool):
        raise ValueError(f"Invalid price {price!r}")
    if isinstance(price, (int, float)):
        return float(price)
    if isinstance(price, dict):
        if "value" in price:
            return parse_price(price["value"])
        return sum(
            float(amount) * DENOMINATION_IN_GP[denomination]
            for denomination, amount in price.items()
            if denomination in DENOMINATION_IN_GP
        )

    try:
        return sum(
            float(amount.replace(",", "")) * DENOMINATION_IN_GP[(unit or "gp").lower()]
            for amount, unit in _price_part.findall(str(price))
        )
    except ValueError:
        # priceless items such as "-" are worth nothing
        logger.debug(f"Unreadable price {price!r}, counting it as 0 gp")
        return 0


def format_price(gp: float) -> str:
    copper = round(gp * 100)
    if copper % 100 == 0:
        return f"{copper // 100} gp"
    if copper % 10 == 0:
        return f"{copper // 10} sp"
    return f"{copper} cp"


def parse_bulk(weight) -> float:
    """`L` is light bulk, `-` or nothing is negligible."""
    if weight is None:
        return 0
    if isinstance(weight, (int, float)):
        return float(weight)
    weight = str(weight).strip()
    if weight.upper() == "L":
        return LIGHT_BULK
    try:
        return float(weight)
    except ValueError:
        return 0


def bulk_multiplier(item: dict) -> int:
    return max(math.ceil(parse_bulk(get_path(item, "data.weight.value"))), 1)


def get_equipment_type(item: dict) -> Optional[EquipmentType]:
    match item.get("type"):
        case "weapon":
            return EquipmentType.weapon
        case "armor":
            if get_path(item, "data.armorType.value") != "shield":
                return EquipmentType.armor
            if get_path(item, "data.armor.value") == 1:
                return EquipmentType.buckler
            if parse_bulk(get_path(item, "data.weight.value")) > 1:
                return EquipmentType.tower
            return EquipmentType.shield
    return None


def _int_path(item: dict, selector: str) -> int:
    value = get_path(item, selector, 0)
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def calculate_final_price_and_level(
    item: dict,
    material_type: Optional[str] = None,
    material_grade: Optional[MaterialGrade | str] = None,
    potency_rune: int | str | None = 0,
    fundamental_rune: Optional[str] = None,
    property_runes: Sequence[str] = ("", "", "", ""),
) -> EquipmentValuation:
    """
    Layer material, potency, property and fundamental runes over a base weapon,
    armor or shield. Levels combine by maximum, prices by sum. Any choice missing
    from the material or rune tables adds nothing.
    """
    equipment_type = get_equipment_type(item)
    if equipment_type is None:
        return EquipmentValuation()
    category = equipment_type.value

    level = _int_path(item, "data.level.value")
    price = parse_price(get_path(item, "data.price.value"))
    hardness = _int_path(item, "data.hardness.value")
    hit_points = _int_path(item, "data.hp.value")
    broken_threshold = _int_path(item, "data.brokenThreshold.value")

    grade = getattr(material_grade, "value", material_grade)
    material = material_entry(material_type, category, grade)
    if material is not None:
        level = max(level, material["level"])
        price += material["basePrice"]
        if "hardness" in material:
            hardness = material["hardness"]
            hit_points = material["hitPoints"]
            broken_threshold = material["brokenThreshold"]
        else:
            price += material["bulkPrice"] * bulk_multiplier(item)

    runes = [rune_entry(category, "potency", potency_rune)]
    runes += [rune_entry(category, "property", slug) for slug in property_runes]
    runes += [rune_entry(category, "fundamental", fundamental_rune)]
    for rune in runes:
        if rune is None:
            continue
        level = max(level, rune["level"])
        price += rune["price"]

    return EquipmentValuation(
        level=level,
        price=price,
        hardness=hardness,
        hitPoints=hit_points,
        brokenThreshold=broken_threshold,
    )
