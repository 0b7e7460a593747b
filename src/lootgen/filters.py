from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable

from lootgen.host import DocumentStore
from models.filters import AppFilter, FilterType
from models.sources import PackSource, PoolSource
from utils import get_path, getLogger

logger = getLogger(__name__)


class EqualityType(Enum):
    EqualTo = "=="
    LessThan = "<"
    LessThanEqualTo = "<="
    GreaterThan = ">"
    GreaterThanEqualTo = ">="
    LocaleInvariant = "~="


class Specification(ABC):
    @abstractmethod
    def is_satisfied_by(self, data: dict) -> bool: ...

    def and_(self, other: "Specification") -> "Specification":
        return AndGroup([self, other])

    def or_(self, other: "Specification") -> "Specification":
        return OrGroup([self, other])

    def not_(self) -> "Specification":
        return NotGroup(self)


class FilterGroup(Specification, ABC):
    def __init__(self, children: Iterable[Specification] | None = None):
        self.children: list[Specification] = list(children or [])

    def add_children(self, others: Specification | Iterable[Specification]):
        if isinstance(others, Specification):
            others = [others]
        self.children.extend(others)


class AndGroup(FilterGroup):
    def is_satisfied_by(self, data: dict) -> bool:
        return all(child.is_satisfied_by(data) for child in self.children)


class OrGroup(FilterGroup):
    def is_satisfied_by(self, data: dict) -> bool:
        return any(child.is_satisfied_by(data) for child in self.children)


class NotGroup(FilterGroup):
    def __init__(self, child: Specification):
        super().__init__([child])

    def add_children(self, others):
        raise TypeError("NotGroup takes exactly one child.")

    def is_satisfied_by(self, data: dict) -> bool:
        return not self.children[0].is_satisfied_by(data)


class WeightedFilter(Specification):
    def __init__(
        self,
        selector: str,
        desired_value: int | str | bool,
        weight: float = 1,
        equality: EqualityType = EqualityType.EqualTo,
    ):
        self.selector = selector
        self.desired_value = desired_value
        self.weight = weight
        self.equality = equality

    def get_value(self, data: dict):
        return get_path(data, self.selector)

    def compare_to(self, value) -> bool:
        if value is None:
            return False
        try:
            match self.equality:
                case EqualityType.EqualTo:
                    return value == self.desired_value
                case EqualityType.LessThan:
                    return value < self.desired_value
                case EqualityType.LessThanEqualTo:
                    return value <= self.desired_value
                case EqualityType.GreaterThan:
                    return value > self.desired_value
                case EqualityType.GreaterThanEqualTo:
                    return value >= self.desired_value
                case EqualityType.LocaleInvariant:
                    return str(value).casefold() == str(self.desired_value).casefold()
        except TypeError:
            return False
        return False

    def is_satisfied_by(self, data: dict) -> bool:
        return self.compare_to(self.get_value(data))


class ArrayIncludesFilter(WeightedFilter):
    def __init__(self, selector: str, desired_value: str, weight: float = 1):
        super().__init__(selector, desired_value, weight, EqualityType.EqualTo)

    def get_value(self, data: dict):
        value = super().get_value(data)
        if isinstance(value, list) and self.desired_value in value:
            return self.desired_value
        return None


FILTER_SELECTORS = {
    FilterType.school: "data.school.value",
    FilterType.level: "data.level.value",
    FilterType.tradition: "data.traditions.value",
    FilterType.rarity: "data.traits.rarity.value",
}


def leaf_for(app_filter: AppFilter) -> WeightedFilter:
    selector = FILTER_SELECTORS[app_filter.filterType]
    if app_filter.filterType == FilterType.tradition:
        return ArrayIncludesFilter(
            selector, str(app_filter.desiredValue), app_filter.weight
        )
    if app_filter.filterType == FilterType.level:
        return WeightedFilter(selector, int(app_filter.desiredValue), app_filter.weight)
    return WeightedFilter(
        selector,
        app_filter.desiredValue,
        app_filter.weight,
        EqualityType.LocaleInvariant,
    )


def build_specification(filters: Iterable[AppFilter]) -> AndGroup:
    """
    Enabled filters of one type are OR-ed together, and the groups for each type
    are AND-ed. A type whose filters are all disabled lets nothing through.
    """
    groups: dict[FilterType, OrGroup] = {}
    for app_filter in filters:
        group = groups.setdefault(app_filter.filterType, OrGroup())
        if app_filter.enabled:
            group.add_children(leaf_for(app_filter))
    return AndGroup(groups.values())


async def filter_pack_to_pool(
    source: PackSource, specification: Specification, store: DocumentStore
) -> PoolSource:
    elements = []
    for document_id in await store.list_ids(source.id):
        record = await store.get(source.id, document_id)
        if record is not None and specification.is_satisfied_by(record):
            elements.append(record)

    logger.debug(f"{len(elements)} records of {source.id} passed the filters")
    return PoolSource(
        storeId=source.storeId,
        name=source.name,
        itemType=source.itemType,
        weight=source.weight,
        enabled=source.enabled,
        elements=elements,
    )
