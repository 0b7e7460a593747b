import os
from typing import Optional

from pydantic import Field

from models.base_model import LootgenBaseModel
from utils import env_flag, env_int


class LootSettings(LootgenBaseModel):
    allow_merging: bool = True
    quick_roll_control: int = Field(default=10, ge=1)
    quick_roll_shift: int = Field(default=5, ge=1)
    output_loot_rolls: bool = False
    output_loot_rolls_whisper: bool = False
    max_draw_retries: int = Field(default=10, ge=0)
    api_key: Optional[str] = None

    @staticmethod
    def from_env() -> "LootSettings":
        return LootSettings(
            allow_merging=env_flag("LOOTGEN_ALLOW_MERGING", True),
            quick_roll_control=env_int("LOOTGEN_QUICK_ROLL_CONTROL", 10),
            quick_roll_shift=env_int("LOOTGEN_QUICK_ROLL_SHIFT", 5),
            output_loot_rolls=env_flag("LOOTGEN_OUTPUT_LOOT_ROLLS", False),
            output_loot_rolls_whisper=env_flag(
                "LOOTGEN_OUTPUT_LOOT_ROLLS_WHISPER", False
            ),
            max_draw_retries=env_int("LOOTGEN_MAX_DRAW_RETRIES", 10),
            api_key=os.getenv("LOOTGEN_API_KEY") or None,
        )
