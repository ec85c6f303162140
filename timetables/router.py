"""
Route datasets to the adapter that knows where their row times live.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timetables.base import BaseTimeSeriesSource

# Registry: source_id -> adapter class, tried in registration order
_registry: dict[str, type["BaseTimeSeriesSource"]] = {}


def register_adapter(adapter_cls: type["BaseTimeSeriesSource"]) -> None:
    """Register an adapter class for its source_id. Re-registering overwrites in place."""
    if not adapter_cls.source_id:
        raise ValueError(f"{adapter_cls.__name__} has no source_id")
    _registry[adapter_cls.source_id] = adapter_cls


def registered_adapters() -> list[str]:
    return list(_registry)


def as_source(dataset) -> "BaseTimeSeriesSource":
    """
    Wrap a dataset in the first registered adapter that accepts it.

    Args:
        dataset: A source instance (returned as-is), a DataFrame indexed by
                 datetimes/durations, a plain DataFrame, or a mapping of
                 column name -> values.

    Returns:
        Adapter exposing resolve_time_axis() and numeric_columns().
    """
    from timetables.base import BaseTimeSeriesSource

    if isinstance(dataset, BaseTimeSeriesSource):
        return dataset
    for adapter_cls in _registry.values():
        if adapter_cls.accepts(dataset):
            return adapter_cls.from_dataset(dataset)
    raise TypeError(
        f"Cannot plot {type(dataset).__name__}; expected a DataFrame or mapping of columns. "
        f"Registered adapters: {list(_registry)}"
    )
