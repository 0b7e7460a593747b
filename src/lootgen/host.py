import random
from copy import deepcopy
from typing import Protocol, Optional

import d20

from lootgen import LootgenException
from models import TableRoll, DocumentRef
from models.sources import TableSource
from utils import getLogger

logger = getLogger(__name__)

DOCUMENT_RESULT_TYPES = ["pack", "document"]


class HostLookupError(LootgenException):
    status_code = 404


class RandomSource(Protocol):
    def uniform(self) -> float: ...


class DiceEvaluator(Protocol):
    def evaluate(self, expression: str) -> int | float: ...


class DocumentStore(Protocol):
    async def get(self, pack_id: str, document_id: str) -> Optional[dict]: ...

    async def list_ids(self, pack_id: str) -> list[str]: ...


class TableRoller(Protocol):
    async def roll(self, table_ref: TableSource) -> TableRoll: ...


class Notifier(Protocol):
    def warn(self, message: str): ...

    def error(self, message: str): ...


class SystemRandomSource:
    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def uniform(self) -> float:
        return self._random.random()


class D20DiceEvaluator:
    def evaluate(self, expression: str) -> int | float:
        return d20.roll(expression).total


class MemoryDocumentStore:
    """
    Compendium packs held in memory as `{pack_id: [record, ...]}`, e.g. a snapshot
    posted by the Foundry module. Records are copied on the way out.
    """

    def __init__(self, packs: dict[str, list[dict]] | None = None):
        self.packs: dict[str, dict[str, dict]] = {}
        for pack_id, records in (packs or {}).items():
            self.add_pack(pack_id, records)

    def add_pack(self, pack_id: str, records: list[dict]):
        self.packs[pack_id] = {r["_id"]: r for r in records if "_id" in r}

    async def get(self, pack_id: str, document_id: str) -> Optional[dict]:
        record = self.packs.get(pack_id, {}).get(document_id)
        return deepcopy(record) if record is not None else None

    async def list_ids(self, pack_id: str) -> list[str]:
        return list(self.packs.get(pack_id, {}).keys())


class MemoryTableRoller:
    """
    Rolls rollable-table records kept in a document store. A table looks like
    `{"_id", "formula", "results": [{"type", "collection", "resultId", "range"}]}`;
    `formula` defaults to `1d<highest range>`.
    """

    def __init__(self, store: DocumentStore, dice: DiceEvaluator):
        self.store = store
        self.dice = dice

    async def roll(self, table_ref: TableSource) -> TableRoll:
        pack_id = table_ref.tableSource.id
        table = await self.store.get(pack_id, table_ref.id)
        if table is None:
            raise HostLookupError(f"Table {table_ref.id} not found in {pack_id}.")

        results = table.get("results", [])
        if not results:
            return TableRoll(rawResult={"table": table_ref.id})

        formula = table.get("formula") or f"1d{max(r['range'][1] for r in results)}"
        total = int(self.dice.evaluate(formula))
        result = next(
            (r for r in results if r["range"][0] <= total <= r["range"][1]), None
        )
        if result is None:
            logger.debug(f"{formula} rolled {total}, no result on {table_ref.id}")
            return TableRoll(rawResult={"table": table_ref.id, "roll": total})

        raw = {"table": table_ref.id, "roll": total, **result}
        if result.get("type") in DOCUMENT_RESULT_TYPES and result.get("resultId"):
            return TableRoll(
                resultRef=DocumentRef(
                    packId=result.get("collection") or pack_id,
                    documentId=result["resultId"],
                ),
                rawResult=raw,
            )
        return TableRoll(rawResult=raw)


class CollectingNotifier:
    def __init__(self):
        self.messages: list[dict] = []

    def warn(self, message: str):
        logger.warning(message)
        self.messages.append({"content": message, "type": "warning"})

    def error(self, message: str):
        self.messages.append(logger.err_msg(message))


class Host:
    def __init__(
        self,
        documents: DocumentStore | None = None,
        tables: TableRoller | None = None,
        dice: DiceEvaluator | None = None,
        rng: RandomSource | None = None,
        notifier: Notifier | None = None,
    ):
        self.documents = documents or MemoryDocumentStore()
        self.dice = dice or D20DiceEvaluator()
        self.tables = tables or MemoryTableRoller(self.documents, self.dice)
        self.random = rng or SystemRandomSource()
        self.notifier = notifier or CollectingNotifier()
