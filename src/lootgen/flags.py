from typing import Any, Iterable, TypeVar

from models.filters import AppFilter, FilterType
from models.sources import DataSource, GenType
from pf2e.filters import spell_filters
from pf2e.tables import sources_of_type
from utils import MODULE_NAME, get_path

FLAGS_KEY = MODULE_NAME
STORED_KEYS = ["weight", "enabled"]

S = TypeVar("S", bound=DataSource)
F = TypeVar("F", bound=AppFilter)


def flag_key(value: str) -> str:
    # flag paths are split on periods, pack ids contain them
    return value.replace(".", "-")


def _with_flags(path: str, with_flags: bool) -> str:
    return f"flags.{FLAGS_KEY}.{path}" if with_flags else path


def source_flag_path(source: DataSource, with_flags: bool = False) -> str:
    category = source.itemType.value if source.itemType else "none"
    return _with_flags(
        f"sources.{category}.{flag_key(source.storeId or source.id or '')}",
        with_flags,
    )


def filter_flag_path(app_filter: AppFilter, with_flags: bool = False) -> str:
    return _with_flags(
        f"filters.{app_filter.filterCategory.value}"
        f".{app_filter.filterType.value}.{flag_key(app_filter.id)}",
        with_flags,
    )


def _stored(flags: dict, path: str) -> dict:
    stored = get_path(flags or {}, path) or {}
    return {k: v for k, v in stored.items() if k in STORED_KEYS}


def get_data_source_settings(flags: dict, source: S) -> S:
    """
    Overlay the weight and enabled state saved on an actor onto a copy of `source`.
    :param flags: the actor's `flags.pf2e-lootgen` object
    """
    return type(source).model_validate(
        {**source.to_dict(), **_stored(flags, source_flag_path(source))}
    )


def get_filter_settings(flags: dict, app_filter: F) -> F:
    return type(app_filter).model_validate(
        {**app_filter.to_dict(), **_stored(flags, filter_flag_path(app_filter))}
    )


def _listify(value) -> list:
    return value if isinstance(value, list) else [value]


def _build_update(paths: Iterable[str], keys, values) -> dict[str, Any]:
    keys, values = _listify(keys), _listify(values)
    if len(keys) != len(values):
        raise ValueError(
            f"keys and values must be of equal length, "
            f"got {len(keys)} and {len(values)}."
        )
    for key in keys:
        if key not in STORED_KEYS:
            raise ValueError(f"{key} is not a stored setting.")

    return {
        f"{path}.{key}": value
        for path in paths
        for key, value in zip(keys, values)
    }


def build_source_setting_update(
    gen_type: GenType, keys, values, sources: Iterable[DataSource] | None = None
) -> dict[str, Any]:
    """
    Flag update setting the same values on every source of a category.
    :param sources: defaults to the built in sources of `gen_type`
    """
    if sources is None:
        sources = sources_of_type(gen_type).values()
    return _build_update(
        [
            source_flag_path(source, True)
            for source in sources
            if source.itemType == gen_type
        ],
        keys,
        values,
    )


def build_filter_setting_update(
    filter_type: FilterType, keys, values, filters: Iterable[AppFilter] | None = None
) -> dict[str, Any]:
    if filters is None:
        filters = spell_filters().values()
    return _build_update(
        [
            filter_flag_path(app_filter, True)
            for app_filter in filters
            if app_filter.filterType == filter_type
        ],
        keys,
        values,
    )
