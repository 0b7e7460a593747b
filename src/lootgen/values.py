from copy import deepcopy

from lootgen.host import DiceEvaluator
from models import DrawResult
from models.sources import TreasureSource
from utils import set_path


def roll_treasure_values(
    results: list[DrawResult], dice: DiceEvaluator
) -> list[DrawResult]:
    """
    Give every treasure drawn from a treasure table a rolled value. The input
    list and its records are left untouched.
    """
    rolled = []
    for result in results:
        if (
            not isinstance(result.source, TreasureSource)
            or result.itemData.get("type") != "treasure"
        ):
            rolled.append(result)
            continue

        item = deepcopy(result.itemData)
        set_path(item, "data.value.value", dice.evaluate(result.source.value))
        set_path(item, "data.denomination.value", result.source.denomination.value)
        rolled.append(DrawResult(itemData=item, source=result.source))
    return rolled
