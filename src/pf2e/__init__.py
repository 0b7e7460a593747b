from types import MappingProxyType

ROLLABLE_TABLES_PACK = "pf2e.rollable-tables"
EQUIPMENT_PACK = "pf2e.equipment-srd"
SPELLS_PACK = "pf2e.spells-srd"

CREATE_KEY_NONE = "none"

PHYSICAL_ITEM_TYPES = frozenset(
    [
        "weapon",
        "armor",
        "equipment",
        "consumable",
        "treasure",
        "backpack",
        "book",
        "kit",
    ]
)

SPELL_SCHOOLS = [
    "abjuration",
    "conjuration",
    "divination",
    "enchantment",
    "evocation",
    "illusion",
    "necromancy",
    "transmutation",
]


def ordinal_number(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def freeze(data):
    """
    Recursively wrap a nested dict/list structure so the lookup tables cannot be
    modified after import.
    """
    if isinstance(data, dict):
        return MappingProxyType({k: freeze(v) for k, v in data.items()})
    if isinstance(data, list):
        return tuple(freeze(v) for v in data)
    return data


def thaw(data):
    if isinstance(data, MappingProxyType):
        return {k: thaw(v) for k, v in data.items()}
    if isinstance(data, tuple):
        return [thaw(v) for v in data]
    return data
