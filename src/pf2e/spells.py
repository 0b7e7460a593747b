from models import SpellItemType

MAX_SPELL_LEVEL = 10

SCROLL_TEMPLATE_ID = {
    1: "RjuupS9xyXDLgyIr",
    2: "Y7UD64foDbDMV9sx",
    3: "ZmefGBXGJF3CFDbn",
    4: "QSQZJ5BC3DeHv153",
    5: "tjLvRWklAylFhBHQ",
    6: "4sGIy77COooxhQuC",
    7: "fomEZZ4MxVVK3uVu",
    8: "iPki3yuoucnj7bIt",
    9: "cFHomF3tty8Wi1e5",
    10: "o1XIHJ4MJyroAHfF",
}

# wands stop at 9th level
WAND_TEMPLATE_ID = {
    1: "UJWiN0K3jqVjxvKk",
    2: "vJZ49cgi8szuQXAD",
    3: "wrDmWkGxmwzYtfiA",
    4: "Sn7v9SsbEDMUIwrO",
    5: "5BF7zMnrPYzyigCs",
    6: "kiXh4SUWKr166ZeM",
    7: "nmXPj9zuMRQBNT60",
    8: "Qs8RgNH6thRPv2jt",
    9: "Fgv722039TVM5JTc",
}

TEMPLATE_IDS = {
    SpellItemType.scroll: SCROLL_TEMPLATE_ID,
    SpellItemType.wand: WAND_TEMPLATE_ID,
}

ITEM_NAME_PREFIX = {
    SpellItemType.scroll: "Scroll",
    SpellItemType.wand: "Wand",
}
