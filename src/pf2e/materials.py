# Data contained in this file is part of the Open Gaming License.
from pf2e import freeze


def durability(hardness: int) -> dict:
    return {
        "hardness": hardness,
        "hitPoints": hardness * 4,
        "brokenThreshold": hardness * 2,
    }


def bulk_priced(level: int, base_price: int, bulk_price: int) -> dict:
    return {"level": level, "basePrice": base_price, "bulkPrice": bulk_price}


def fixed(level: int, price: int, hardness: int) -> dict:
    return {"level": level, "basePrice": price, "bulkPrice": 0, **durability(hardness)}


_PLAIN = {"standard": bulk_priced(0, 0, 0)}

_materials = {
    "cloth": {
        "label": "Cloth",
        "defaultGrade": "standard",
        "weapon": _PLAIN,
        "armor": _PLAIN,
    },
    "leather": {
        "label": "Leather",
        "defaultGrade": "standard",
        "weapon": _PLAIN,
        "armor": _PLAIN,
    },
    "metal": {
        "label": "Metal",
        "defaultGrade": "standard",
        "weapon": _PLAIN,
        "armor": _PLAIN,
    },
    "wood": {
        "label": "Wood",
        "defaultGrade": "standard",
        "weapon": _PLAIN,
        "armor": _PLAIN,
    },
    "adamantine": {
        "label": "Adamantine",
        "defaultGrade": "standard",
        "weapon": {
            "standard": bulk_priced(11, 1400, 140),
            "high": bulk_priced(17, 13000, 1350),
        },
        "armor": {
            "standard": bulk_priced(12, 1600, 160),
            "high": bulk_priced(19, 32000, 3200),
        },
        "buckler": {
            "standard": fixed(8, 400, 8),
            "high": fixed(16, 8000, 11),
        },
        "shield": {
            "standard": fixed(8, 440, 10),
            "high": fixed(16, 8800, 13),
        },
    },
    "coldIron": {
        "label": "Cold Iron",
        "defaultGrade": "standard",
        "weapon": {
            "low": bulk_priced(2, 40, 4),
            "standard": bulk_priced(10, 880, 88),
            "high": bulk_priced(16, 9000, 900),
        },
        "armor": {
            "low": bulk_priced(5, 140, 14),
            "standard": bulk_priced(11, 1200, 120),
            "high": bulk_priced(18, 20000, 2000),
        },
        "buckler": {
            "low": fixed(2, 30, 3),
            "standard": fixed(7, 300, 5),
            "high": fixed(15, 5000, 8),
        },
        "shield": {
            "low": fixed(2, 34, 5),
            "standard": fixed(7, 340, 7),
            "high": fixed(15, 5500, 10),
        },
    },
    "darkwood": {
        "label": "Darkwood",
        "defaultGrade": "standard",
        "weapon": {
            "standard": bulk_priced(11, 1400, 140),
            "high": bulk_priced(17, 13500, 1350),
        },
        "armor": {
            "standard": bulk_priced(12, 1600, 160),
            "high": bulk_priced(19, 32000, 3200),
        },
        "buckler": {
            "standard": fixed(8, 400, 3),
            "high": fixed(16, 8000, 5),
        },
        "shield": {
            "standard": fixed(8, 440, 5),
            "high": fixed(16, 8800, 8),
        },
        "tower": {
            "standard": fixed(8, 560, 5),
            "high": fixed(16, 11200, 8),
        },
    },
    "dragonhide": {
        "label": "Dragonhide",
        "defaultGrade": "standard",
        "armor": {
            "standard": bulk_priced(12, 1600, 160),
            "high": bulk_priced(19, 32000, 3200),
        },
        "buckler": {
            "standard": fixed(8, 400, 4),
            "high": fixed(16, 8000, 8),
        },
        "shield": {
            "standard": fixed(8, 440, 7),
            "high": fixed(16, 8800, 11),
        },
    },
    "mithral": {
        "label": "Mithral",
        "defaultGrade": "standard",
        "weapon": {
            "standard": bulk_priced(11, 1400, 140),
            "high": bulk_priced(17, 13500, 1350),
        },
        "armor": {
            "standard": bulk_priced(12, 1600, 160),
            "high": bulk_priced(19, 32000, 3200),
        },
        "buckler": {
            "standard": fixed(8, 400, 3),
            "high": fixed(16, 8000, 6),
        },
        "shield": {
            "standard": fixed(8, 440, 5),
            "high": fixed(16, 8800, 8),
        },
    },
    "orichalcum": {
        "label": "Orichalcum",
        "defaultGrade": "high",
        "weapon": {"high": bulk_priced(18, 22500, 2250)},
        "armor": {"high": bulk_priced(20, 55000, 5500)},
        "buckler": {"high": fixed(17, 12000, 14)},
        "shield": {"high": fixed(17, 13200, 16)},
    },
    "silver": {
        "label": "Silver",
        "defaultGrade": "standard",
        "weapon": {
            "low": bulk_priced(2, 40, 4),
            "standard": bulk_priced(10, 880, 88),
            "high": bulk_priced(16, 9000, 900),
        },
        "armor": {
            "low": bulk_priced(5, 140, 14),
            "standard": bulk_priced(11, 1200, 120),
            "high": bulk_priced(18, 20000, 2000),
        },
        "buckler": {
            "low": fixed(2, 30, 1),
            "standard": fixed(7, 300, 3),
            "high": fixed(15, 5000, 6),
        },
        "shield": {
            "low": fixed(2, 34, 3),
            "standard": fixed(7, 340, 5),
            "high": fixed(15, 5500, 8),
        },
    },
    "sovereignSteel": {
        "label": "Sovereign Steel",
        "defaultGrade": "standard",
        "weapon": {
            "standard": bulk_priced(12, 1600, 160),
            "high": bulk_priced(19, 32000, 3200),
        },
        "armor": {
            "standard": bulk_priced(13, 2400, 240),
            "high": bulk_priced(20, 50000, 5000),
        },
    },
    "warpglass": {
        "label": "Warpglass",
        "defaultGrade": "high",
        "weapon": {"high": bulk_priced(17, 14000, 1400)},
    },
}

ITEM_MATERIALS = freeze(
    {slug: {"slug": slug, **material} for slug, material in _materials.items()}
)


def materials_of_type(equipment_types) -> dict:
    """
    :param equipment_types: category keys (`weapon`, `armor`, `buckler`...) to match
    :return: every material with data for at least one of the categories, by slug
    """
    return {
        slug: material
        for slug, material in ITEM_MATERIALS.items()
        if any(t in material for t in equipment_types)
    }


def material_entry(material_type: str | None, equipment_type: str, grade: str | None):
    if not material_type or not grade:
        return None
    return ITEM_MATERIALS.get(material_type, {}).get(equipment_type, {}).get(grade)
