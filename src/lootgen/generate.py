from lootgen.draw import draw_from_sources, summarize_draws
from lootgen.filters import build_specification, filter_pack_to_pool
from lootgen.host import Host
from lootgen.spells import create_spell_items
from lootgen.stacks import merge_existing_stacks, merge_stacks
from lootgen.values import roll_treasure_values
from models import DrawOptions
from models.api import LootPlan, LootOutcome
from models.settings import LootSettings
from models.sources import GenType, PackSource, DataSource
from utils import getLogger

logger = getLogger(__name__)


def quick_roll_count(
    count: int, settings: LootSettings, control: bool = False, shift: bool = False
) -> int:
    """Holding control or shift while rolling multiplies the number of draws."""
    if control:
        count *= settings.quick_roll_control
    if shift:
        count *= settings.quick_roll_shift
    return count


async def apply_filters(plan: LootPlan, host: Host) -> list[DataSource]:
    sources = []
    for source in plan.sources:
        if not source.enabled:
            continue
        filters = [f for f in plan.filters if f.filterCategory == source.itemType]
        if isinstance(source, PackSource) and filters:
            source = await filter_pack_to_pool(
                source, build_specification(filters), host.documents
            )
        sources.append(source)
    return sources


async def generate_loot(
    plan: LootPlan, host: Host, settings: LootSettings
) -> LootOutcome:
    """
    Draw loot for an actor and fold it into the actor's inventory. Treasure gets
    a rolled value, spells become scrolls or wands, then everything is merged into
    existing stacks when merging is allowed and among itself otherwise.
    """
    count = quick_roll_count(plan.count, settings, plan.control, plan.shift)
    sources = await apply_filters(plan, host)
    options = DrawOptions(
        displayChat=plan.displayChat, maxRetries=settings.max_draw_retries
    )

    draws = await draw_from_sources(count, sources, host, options)
    draws = roll_treasure_values(draws, host.dice)

    spell_draws = [d for d in draws if d.source.itemType == GenType.spell]
    items = [d.itemData for d in draws if d.source.itemType != GenType.spell]
    if spell_draws:
        items += await create_spell_items(
            spell_draws, plan.spellItemTypes, host.documents, host.random, host.notifier
        )

    if settings.allow_merging:
        merged_old, new_items = merge_existing_stacks(
            plan.existingItems, items, plan.compareValues
        )
        updates = [
            merged
            for merged, old in zip(merged_old, plan.existingItems)
            if merged != old
        ]
    else:
        updates, new_items = [], merge_stacks(items, plan.compareValues)

    logger.info(
        f"Generated {len(new_items)} new stacks and {len(updates)} updates "
        f"from {len(draws)} draws"
    )

    chat = None
    if settings.output_loot_rolls or plan.displayChat:
        chat = summarize_draws(draws, settings)

    return LootOutcome(
        draws=draws,
        items=new_items,
        updates=updates,
        chat=chat,
        notifications=list(getattr(host.notifier, "messages", [])),
    )
