# Data contained in this file is part of the Open Gaming License.
from pf2e import CREATE_KEY_NONE, freeze

RUNE_NONE = {"slug": CREATE_KEY_NONE, "label": "None", "level": 0, "price": 0}


def rune(slug: str, label: str, level: int, price: int) -> dict:
    return {"slug": slug, "label": label, "level": level, "price": price}


def rune_map(*runes: dict, none_key: str = CREATE_KEY_NONE) -> dict:
    return {none_key: {**RUNE_NONE, "slug": none_key}, **{r["slug"]: r for r in runes}}


_weapon_property = [
    rune("anarchic", "PF2E.WeaponPropertyRuneAnarchic", 11, 1400),
    rune("ancestralEchoing", "PF2E.WeaponPropertyRuneAncestralEchoing", 15, 9500),
    rune("axiomatic", "PF2E.WeaponPropertyRuneAxiomatic", 11, 1400),
    rune("bloodbane", "PF2E.WeaponPropertyRuneBloodbane", 8, 475),
    rune("corrosive", "PF2E.WeaponPropertyRuneCorrosive", 8, 500),
    rune("dancing", "PF2E.WeaponPropertyRuneDancing", 13, 2700),
    rune("disrupting", "PF2E.WeaponPropertyRuneDisrupting", 5, 150),
    rune("fearsome", "PF2E.WeaponPropertyRuneFearsome", 5, 160),
    rune("flaming", "PF2E.WeaponPropertyRuneFlaming", 8, 500),
    rune("frost", "PF2E.WeaponPropertyRuneFrost", 8, 500),
    rune("ghostTouch", "PF2E.WeaponPropertyRuneGhostTouch", 4, 75),
    rune("greaterBloodbane", "PF2E.WeaponPropertyRuneGreaterBloodbane", 15, 6500),
    rune("greaterCorrosive", "PF2E.WeaponPropertyRuneGreaterCorrosive", 15, 6500),
    rune("greaterDisrupting", "PF2E.WeaponPropertyRuneGreaterDisrupting", 14, 4300),
    rune("greaterFearsome", "PF2E.WeaponPropertyRuneGreaterFearsome", 12, 2000),
    rune("greaterFlaming", "PF2E.WeaponPropertyRuneGreaterFlaming", 15, 6500),
    rune("greaterFrost", "PF2E.WeaponPropertyRuneGreaterFrost", 15, 6500),
    rune("greaterShock", "PF2E.WeaponPropertyRuneGreaterShock", 15, 6500),
    rune("greaterThundering", "PF2E.WeaponPropertyRuneGreaterThundering", 15, 6500),
    rune("grievous", "PF2E.WeaponPropertyRuneGrievous", 9, 700),
    rune("holy", "PF2E.WeaponPropertyRuneHoly", 11, 1400),
    rune("keen", "PF2E.WeaponPropertyRuneKeen", 13, 3000),
    rune("kinWarding", "PF2E.WeaponPropertyRuneKinWarding", 3, 52),
    rune("pacifying", "PF2E.WeaponPropertyRunePacifying", 5, 150),
    rune("returning", "PF2E.WeaponPropertyRuneReturning", 3, 55),
    rune("serrating", "PF2E.WeaponPropertyRuneSerrating", 10, 1000),
    rune("shifting", "PF2E.WeaponPropertyRuneShifting", 6, 225),
    rune("shock", "PF2E.WeaponPropertyRuneShock", 8, 500),
    rune("speed", "PF2E.WeaponPropertyRuneSpeed", 16, 10000),
    rune("spellStoring", "PF2E.WeaponPropertyRuneSpellStoring", 13, 2700),
    rune("thundering", "PF2E.WeaponPropertyRuneThundering", 8, 500),
    rune("unholy", "PF2E.WeaponPropertyRuneUnholy", 11, 1400),
    rune("vorpal", "PF2E.WeaponPropertyRuneVorpal", 17, 15000),
    rune("wounding", "PF2E.WeaponPropertyRuneWounding", 7, 340),
]

_armor_property = [
    rune("acidResistant", "PF2E.ArmorPropertyRuneAcidResistant", 8, 420),
    rune("antimagic", "PF2E.ArmorPropertyRuneAntimagic", 15, 6500),
    rune("coldResistant", "PF2E.ArmorPropertyRuneColdResistant", 8, 420),
    rune(
        "electricityResistant", "PF2E.ArmorPropertyRuneElectricityResistant", 8, 420
    ),
    rune("ethereal", "PF2E.ArmorPropertyRuneEthereal", 17, 13500),
    rune("fireResistant", "PF2E.ArmorPropertyRuneFireResistant", 8, 420),
    rune("fortification", "PF2E.ArmorPropertyRuneFortification", 12, 2000),
    rune("glamered", "PF2E.ArmorPropertyRuneGlamered", 5, 140),
    rune(
        "greaterAcidResistant", "PF2E.ArmorPropertyRuneGreaterAcidResistant", 12, 1650
    ),
    rune(
        "greaterColdResistant", "PF2E.ArmorPropertyRuneGreaterColdResistant", 12, 1650
    ),
    rune(
        "greaterElectricityResistant",
        "PF2E.ArmorPropertyRuneGreaterElectricityResistant",
        12,
        1650,
    ),
    rune(
        "greaterFireResistant", "PF2E.ArmorPropertyRuneGreaterFireResistant", 12, 1650
    ),
    rune(
        "greaterFortification",
        "PF2E.ArmorPropertyRuneGreaterFortification",
        18,
        24000,
    ),
    rune(
        "greaterInvisibility", "PF2E.ArmorPropertyRuneGreaterInvisibility", 10, 1000
    ),
    rune("greaterReady", "PF2E.ArmorPropertyRuneGreaterReady", 11, 1200),
    rune("greaterShadow", "PF2E.ArmorPropertyRuneGreaterShadow", 9, 650),
    rune("greaterSlick", "PF2E.ArmorPropertyRuneGreaterSlick", 8, 450),
    rune("greaterWinged", "PF2E.ArmorPropertyRuneGreaterWinged", 19, 35000),
    rune("invisibility", "PF2E.ArmorPropertyRuneInvisibility", 8, 500),
    rune("majorShadow", "PF2E.ArmorPropertyRuneMajorShadow", 17, 14000),
    rune("majorSlick", "PF2E.ArmorPropertyRuneMajorSlick", 16, 9000),
    rune("ready", "PF2E.ArmorPropertyRuneReady", 6, 200),
    rune("rockBraced", "PF2E.ArmorPropertyRuneRockBraced", 13, 3000),
    rune("shadow", "PF2E.ArmorPropertyRuneShadow", 3, 55),
    rune("sinisterKnight", "PF2E.ArmorPropertyRuneSinisterKnight", 8, 500),
    rune("slick", "PF2E.ArmorPropertyRuneSlick", 3, 45),
    rune("winged", "PF2E.ArmorPropertyRuneWinged", 13, 2500),
]

ITEM_RUNES = freeze(
    {
        "weapon": {
            "potency": rune_map(
                rune("1", "PF2E.WeaponPotencyRune1", 2, 35),
                rune("2", "PF2E.WeaponPotencyRune2", 10, 935),
                rune("3", "PF2E.WeaponPotencyRune3", 16, 8935),
                rune("4", "PF2E.WeaponPotencyRune4", 25, 0),
                none_key="0",
            ),
            "fundamental": rune_map(
                rune("striking", "PF2E.ArmorStrikingRune", 4, 65),
                rune("greaterStriking", "PF2E.ArmorGreaterStrikingRune", 12, 1065),
                rune("majorStriking", "PF2E.ArmorMajorStrikingRune", 19, 31065),
            ),
            "property": rune_map(*_weapon_property),
        },
        "armor": {
            "potency": rune_map(
                rune("1", "PF2E.ArmorPotencyRune1", 5, 160),
                rune("2", "PF2E.ArmorPotencyRune2", 11, 1060),
                rune("3", "PF2E.ArmorPotencyRune3", 18, 20560),
                rune("4", "PF2E.ArmorPotencyRune4", 25, 0),
                none_key="0",
            ),
            "fundamental": rune_map(
                rune("resilient", "PF2E.ArmorResilientRune", 8, 340),
                rune("greaterResilient", "PF2E.ArmorGreaterResilientRune", 14, 3440),
                rune("majorResilient", "PF2E.ArmorMajorResilientRune", 20, 49440),
            ),
            "property": rune_map(*_armor_property),
        },
        "buckler": {"fundamental": {}, "property": {}},
        "shield": {"fundamental": {}, "property": {}},
        "tower": {"fundamental": {}, "property": {}},
    }
)


def rune_entry(equipment_type: str, kind: str, slug) -> dict | None:
    if slug is None or slug == "":
        return None
    return ITEM_RUNES.get(equipment_type, {}).get(kind, {}).get(str(slug))
