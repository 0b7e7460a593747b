from copy import deepcopy
from typing import Optional

from lootgen.pricing import parse_price, format_price
from pf2e import PHYSICAL_ITEM_TYPES
from utils import get_path, set_path, slugify


def is_physical(item: dict) -> bool:
    return item.get("type") in PHYSICAL_ITEM_TYPES


def item_value(item: dict) -> str:
    value = get_path(item, "data.value.value")
    if item.get("type") == "treasure" and value is not None:
        denomination = get_path(item, "data.denomination.value") or "gp"
        return format_price(parse_price(f"{value} {denomination}"))
    return format_price(parse_price(get_path(item, "data.price.value")))


def stack_key(item: dict, compare_values: bool = False) -> Optional[str]:
    """
    Identity of the stack an item belongs to: its slug, plus its price when values
    are compared. Non-physical items have no stack.
    """
    if not is_physical(item):
        return None
    slug = get_path(item, "data.slug") or slugify(item.get("name", ""))
    if not slug:
        return None
    return f"{slug}:{item_value(item)}" if compare_values else slug


def get_quantity(item: dict) -> int:
    return get_path(item, "data.quantity.value", 1) or 0


def merge_item(target: dict, other: dict) -> dict:
    set_path(target, "data.quantity.value", get_quantity(target) + get_quantity(other))
    return target


def merge_stacks(items: list[dict], compare_values: bool = False) -> list[dict]:
    """
    Fold items sharing a stack key into the first of them, keeping first
    occurrence order. Returns copies; `items` is not modified.
    """
    merged = []
    stacks: dict[str, dict] = {}
    for item in items:
        item = deepcopy(item)
        key = stack_key(item, compare_values)
        if key is None:
            merged.append(item)
        elif key in stacks:
            merge_item(stacks[key], item)
        else:
            stacks[key] = item
            merged.append(item)
    return merged


def merge_existing_stacks(
    old_items: list[dict], new_items: list[dict], compare_values: bool = False
) -> tuple[list[dict], list[dict]]:
    """
    Merge new items into matching existing stacks, then merge the leftovers
    among themselves.
    :return: (copies of `old_items` with merged quantities, leftover new items)
    """
    merged_old = [deepcopy(item) for item in old_items]
    existing: dict[str, dict] = {}
    for item in merged_old:
        key = stack_key(item, compare_values)
        if key is not None:
            existing.setdefault(key, item)

    remaining = []
    for item in new_items:
        key = stack_key(item, compare_values)
        if key is not None and key in existing:
            merge_item(existing[key], item)
        else:
            remaining.append(item)

    return merged_old, merge_stacks(remaining, compare_values)
