from copy import deepcopy
from typing import Sequence

from lootgen.host import DocumentStore, RandomSource, Notifier, HostLookupError
from lootgen.selector import choose_uniform
from models import DrawResult, SpellItemType
from models.sources import PackSource
from pf2e import EQUIPMENT_PACK, SPELLS_PACK
from pf2e.spells import MAX_SPELL_LEVEL, TEMPLATE_IDS, ITEM_NAME_PREFIX
from utils import get_path, set_path, getLogger, random_id, slugify

logger = getLogger(__name__)

WAND_WARNING = (
    "Wands cannot hold 10th level spells, so some spells were skipped. "
    "Enable scrolls to create items for them."
)


def spell_level(spell: dict) -> int:
    # cantrips are stored as level 0 but are cast at 1st level
    level = int(get_path(spell, "data.level.value", 1) or 1)
    return min(max(level, 1), MAX_SPELL_LEVEL)


def item_types_for_level(
    level: int, allowed_item_types: Sequence[SpellItemType]
) -> list[SpellItemType]:
    return [t for t in allowed_item_types if level in TEMPLATE_IDS[t]]


def spell_item_name(item_type: SpellItemType, spell: dict, level: int) -> str:
    return f"{ITEM_NAME_PREFIX[item_type]} of {spell.get('name', '')} (Level {level})"


def spell_traits(spell: dict) -> list[str]:
    """Magic traditions followed by the damage types the spell deals."""
    traits = list(get_path(spell, "data.traditions.value", []) or [])
    for damage in (get_path(spell, "data.damage.value", {}) or {}).values():
        if not isinstance(damage, dict):
            continue
        damage_type = get_path(damage, "type.value")
        if damage_type:
            traits.append(damage_type)
    return traits


def build_spell_item(
    template: dict, item_type: SpellItemType, spell: dict, pack_id: str, level: int
) -> dict:
    item = deepcopy(template)
    item["_id"] = random_id()
    item["name"] = spell_item_name(item_type, spell, level)
    set_path(item, "data.slug", slugify(item["name"]))

    traits = list(get_path(item, "data.traits.value", []) or [])
    traits += [t for t in dict.fromkeys(spell_traits(spell)) if t not in traits]
    set_path(item, "data.traits.value", traits)
    rarity = get_path(spell, "data.traits.rarity.value")
    if rarity is not None:
        set_path(item, "data.traits.rarity.value", rarity)

    link = f"@Compendium[{pack_id}.{spell.get('_id', '')}]{{{spell.get('name', '')}}}"
    description = get_path(item, "data.description.value", "") or ""
    set_path(item, "data.description.value", f"{link}\n<hr />{description}")

    set_path(item, "data.spell", {"data": deepcopy(spell), "heightenedLevel": level})
    return item


async def create_spell_items(
    draw_results: Sequence[DrawResult],
    allowed_item_types: Sequence[SpellItemType],
    store: DocumentStore,
    rng: RandomSource,
    notifier: Notifier,
) -> list[dict]:
    """
    Turn drawn spells into scrolls or wands, choosing uniformly among the allowed
    types that exist for the spell's level. Spells no allowed type can hold are
    skipped with a single warning.
    """
    if not allowed_item_types:
        raise ValueError("At least one spell item type must be allowed.")
    allowed_item_types = list(
        dict.fromkeys(SpellItemType(t) for t in allowed_item_types)
    )

    items = []
    skipped = 0
    for result in draw_results:
        spell = result.itemData
        if spell.get("type") != "spell":
            continue

        level = spell_level(spell)
        choices = item_types_for_level(level, allowed_item_types)
        if not choices:
            skipped += 1
            continue

        item_type = choose_uniform(choices, rng)
        template_id = TEMPLATE_IDS[item_type][level]
        template = await store.get(EQUIPMENT_PACK, template_id)
        if template is None:
            raise HostLookupError(
                f"{ITEM_NAME_PREFIX[item_type]} template {template_id} "
                f"not found in {EQUIPMENT_PACK}."
            )

        pack_id = (
            result.source.id if isinstance(result.source, PackSource) else SPELLS_PACK
        )
        items.append(build_spell_item(template, item_type, spell, pack_id, level))

    if skipped:
        logger.info(f"Skipped {skipped} spells with no valid item type")
        notifier.warn(WAND_WARNING)
    return items
