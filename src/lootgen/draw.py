from copy import deepcopy
from typing import Optional, Sequence

from lootgen import LootgenException
from lootgen.host import Host
from lootgen.selector import choose_weighted, choose_uniform
from models import DrawOptions, DrawResult
from models.settings import LootSettings
from models.sources import DataSource, PackSource, PoolSource, TableSource
from utils import getLogger, tabulate

logger = getLogger(__name__)


class SourceConfigurationError(LootgenException):
    status_code = 400


class DrawExhaustedError(LootgenException):
    status_code = 409


def validate_source(source: DataSource):
    if not isinstance(source, (TableSource, PackSource, PoolSource)):
        raise SourceConfigurationError(
            f"Unknown source type {getattr(source, 'sourceType', None)!r} "
            f"on source {source.name!r}."
        )
    if not isinstance(source, PoolSource) and not source.id:
        raise SourceConfigurationError(
            f"Source {source.name!r} of type {source.sourceType.value} has no id."
        )


async def resolve_source(source: DataSource, host: Host) -> Optional[dict]:
    """
    Draw one item record from a source.
    :return: the record, or None when the source produced nothing usable this time
    """
    match source:
        case TableSource():
            roll = await host.tables.roll(source)
            if roll.resultRef is None:
                return None
            return await host.documents.get(
                roll.resultRef.packId, roll.resultRef.documentId
            )
        case PackSource():
            # every document in the pack is equally likely
            ids = await host.documents.list_ids(source.id)
            if not ids:
                return None
            return await host.documents.get(source.id, choose_uniform(ids, host.random))
        case PoolSource():
            if not source.elements:
                return None
            return deepcopy(choose_uniform(source.elements, host.random))
        case _:
            raise SourceConfigurationError(
                f"Unknown source type {getattr(source, 'sourceType', None)!r}."
            )


async def draw_from_sources(
    count: int,
    sources: Sequence[DataSource],
    host: Host,
    options: DrawOptions | None = None,
) -> list[DrawResult]:
    """
    Draw `count` items, choosing a source by weight for every slot.

    A slot whose source yields nothing is retried with a freshly chosen source
    until it succeeds or has missed more than `options.maxRetries` times.
    :param sources: enabled sources to draw from
    :raises SourceConfigurationError: a source is malformed or all weights are zero
    :raises DrawExhaustedError: a slot ran out of retries
    """
    if count < 0:
        raise ValueError(f"Cannot draw a negative number of items ({count}).")
    if count == 0 or not sources:
        return []

    options = options or DrawOptions()
    for source in sources:
        validate_source(source)

    candidates = [(source, source.weight) for source in sources]
    if sum(weight for _, weight in candidates) <= 0:
        raise SourceConfigurationError(
            "At least one source must have a weight above zero."
        )

    results = []
    for slot in range(count):
        misses = 0
        while True:
            source = choose_weighted(candidates, host.random)
            item = await resolve_source(source, host)
            if item is not None:
                results.append(DrawResult(itemData=item, source=source))
                break

            misses += 1
            logger.debug(
                f"Draw {slot + 1}/{count} missed on {source.name!r} ({misses})"
            )
            if misses > options.maxRetries:
                raise DrawExhaustedError(
                    f"Could not draw item {slot + 1} of {count} "
                    f"after {misses} attempts."
                )

    return results


def summarize_draws(results: list[DrawResult], settings: LootSettings) -> dict:
    source_names = {r.source.storeId or r.source.name for r in results}
    rows = [
        {"Item": r.itemData.get("name", ""), "Source": r.source.name}
        for r in results
    ]
    return {
        "flavor": f"Drew {len(results)} result(s) from {len(source_names)} source(s).",
        "content": tabulate(rows) if rows else "",
        "whisper": settings.output_loot_rolls_whisper,
    }
