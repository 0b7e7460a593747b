from models.filters import AppFilter, FilterType
from models.sources import GenType
from pf2e import SPELL_SCHOOLS, ordinal_number
from pf2e.spells import MAX_SPELL_LEVEL


def level_filter_id(level: int) -> str:
    return f"level-{level}"


def school_filter_id(school: str) -> str:
    return school


def spell_level_filters() -> dict[str, AppFilter]:
    return {
        level_filter_id(level): AppFilter(
            id=level_filter_id(level),
            name=f"{ordinal_number(level)} Level",
            filterType=FilterType.level,
            filterCategory=GenType.spell,
            desiredValue=level,
        )
        for level in range(1, MAX_SPELL_LEVEL + 1)
    }


def spell_school_filters() -> dict[str, AppFilter]:
    return {
        school_filter_id(school): AppFilter(
            id=school_filter_id(school),
            name=school.capitalize(),
            filterType=FilterType.school,
            filterCategory=GenType.spell,
            desiredValue=school,
        )
        for school in SPELL_SCHOOLS
    }


def spell_filters() -> dict[str, AppFilter]:
    return {**spell_level_filters(), **spell_school_filters()}
