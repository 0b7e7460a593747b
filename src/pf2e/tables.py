# Data contained in this file is part of the Open Gaming License.
from models.sources import (
    Denomination,
    GenType,
    PackSource,
    TableSource,
    TreasureSource,
    DataSource,
)
from pf2e import ROLLABLE_TABLES_PACK, SPELLS_PACK, ordinal_number

rollable_tables_pack = PackSource(
    id=ROLLABLE_TABLES_PACK, name="Rollable Tables", weight=1, enabled=True
)

# ordered 1st through 20th level
permanent_table_ids = [
    "JyDn13oc0MdLjpyw",
    "q6hhGYSee35XxKE8",
    "Ow2zoRUSX0s7JjMo",
    "k0Al2PJni2NTtdIY",
    "k5bG37570BbflxR2",
    "9xol7FdCfaU585WR",
    "r8F8mI2BZU6nOMQB",
    "QoEkRoteKJwHHVRd",
    "AJOYeeeF3E8UC7KF",
    "W0qudblot2Z9Vu86",
    "ood552HB1onSdJFS",
    "uzkmxRIn4CtzfP47",
    "eo7kjM8xv6KD5h5q",
    "cBpFoBUNSApkvP6L",
    "X2QkgnYrda4mV5v3",
    "J7XfeVrfUj72IkRY",
    "0jlGmwn6YGqsfG1q",
    "6FmhLLYH94xhucIs",
    "gkdB45QC0u1WeiRA",
    "NOkobOGi0nqsboHI",
]

consumable_table_ids = [
    "tlX5PLwar8b1tmiQ",
    "g30jZWCJEiK1RlIa",
    "mDPLoPYwuPo3o0Wj",
    "0WpkRFm8SyfwVCP6",
    "zRyuNslbOzN9oW5u",
    "A68C9O0vtWbFXbfS",
    "E9ZNupg1p4yLpfrd",
    "UmJGUUgN9TQtFQDI",
    "XAJFTpuo8qrcW30P",
    "AIBvZzHidUXxZfEF",
    "Ca7vD8PZtMPqVuHu",
    "5HHqLskEnfjxpkCO",
    "awfTQvkm7NrRjRaQ",
    "Vhuuy0vFJV5tYldR",
    "Af7beeFZhtvDAZaM",
    "aomFSKgGl52z7tdX",
    "YyQkwd1PksU1Lno4",
    "PSs31Xj5RfszMbAe",
    "pH85KVl31VBdENuy",
    "nusyoQjLs0ZxifRd",
]

# (table id, name, value dice, denomination)
treasure_tables = [
    ("ucTtWBPXViITI8wr", "Lesser Semiprecious Stones", "1d4*5", Denomination.silver),
    ("mCzuipepJAJcuY0H", "Moderate Semiprecious Stones", "1d4*25", Denomination.silver),
    ("P3HzJtS2iUUWMedJ", "Greater Semiprecious Stones", "1d4*5", Denomination.gold),
    ("ZCYAQplm6zORj6eN", "Lesser Precious Stones", "1d4*50", Denomination.gold),
    ("wCXPh3nft3qWuxro", "Moderate Precious Stones", "1d4*100", Denomination.gold),
    ("teZCrF2SOghusarb", "Greater Precious Stones", "1d4*500", Denomination.gold),
    ("ME37cisDz8J2m0H7", "Minor Art Object", "1d4*1", Denomination.gold),
    ("zyXbnTnUGs7tWR5j", "Lesser Art Object", "1d4*10", Denomination.gold),
    ("bCD07W38YjbnyVoZ", "Moderate Art Object", "1d4*25", Denomination.gold),
    ("qmxGfxkMp9vCOtNQ", "Greater Art Object", "1d4*250", Denomination.gold),
    ("hTBTUf9dmhDkpIo8", "Major Art Object", "1d4*1000", Denomination.gold),
]


def table_store_id(table_id: str) -> str:
    return f"table-{table_id}"


def treasure_range(value: str) -> str:
    """
    Format a `1d4*N` value roll as the `N-4N` range shown next to the table name.
    """
    multiplier = int(value[len("1d4*") :])
    return f"{multiplier}-{multiplier * 4}"


def _leveled_sources(table_ids: list[str], gen_type: GenType) -> dict:
    return {
        table_store_id(table_id): TableSource(
            id=table_id,
            storeId=table_store_id(table_id),
            name=f"{ordinal_number(level + 1)}-Level",
            tableSource=rollable_tables_pack,
            itemType=gen_type,
            weight=1,
            enabled=True,
        )
        for level, table_id in enumerate(table_ids)
    }


def permanent_sources() -> dict[str, TableSource]:
    return _leveled_sources(permanent_table_ids, GenType.permanent)


def consumable_sources() -> dict[str, TableSource]:
    return _leveled_sources(consumable_table_ids, GenType.consumable)


def treasure_sources() -> dict[str, TreasureSource]:
    return {
        table_store_id(table_id): TreasureSource(
            id=table_id,
            storeId=table_store_id(table_id),
            name=f"{name} ({treasure_range(value)}{denomination.value})",
            value=value,
            denomination=denomination,
            tableSource=rollable_tables_pack,
            itemType=GenType.treasure,
            weight=1,
            enabled=True,
        )
        for table_id, name, value, denomination in treasure_tables
    }


def spell_sources() -> dict[str, PackSource]:
    return {
        f"pack-{SPELLS_PACK}": PackSource(
            id=SPELLS_PACK,
            storeId=f"pack-{SPELLS_PACK}",
            name="SRD Spells",
            itemType=GenType.spell,
            weight=1,
            enabled=True,
        )
    }


def sources_of_type(gen_type: GenType) -> dict[str, DataSource]:
    match gen_type:
        case GenType.treasure:
            return treasure_sources()
        case GenType.permanent:
            return permanent_sources()
        case GenType.consumable:
            return consumable_sources()
        case GenType.spell:
            return spell_sources()
