"""Process-wide registry of named DataFrames."""

from __future__ import annotations

import logging
from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass, field
from typing import Any

import pandas as pd


logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(eq=False)
class DatasetNamespace(MutableMapping[str, pd.DataFrame]):
    """Mutable mapping from dataset names to DataFrames.

    Writes are visible to every later reader of the same instance. There is no
    locking; concurrent writers to the same name race.
    """

    datasets: dict[str, pd.DataFrame] = field(default_factory=dict)

    def get(self, name: str, default: Any = _MISSING) -> Any:
        """Retrieve a dataset by name.

        Unknown names raise ``KeyError`` unless ``default`` is given, in which
        case ``default`` is returned as with ``dict.get``.
        """
        if name not in self.datasets:
            if default is not _MISSING:
                return default
            raise KeyError(f"Unknown dataset '{name}'.")
        return self.datasets[name]

    def set(self, name: str, df: pd.DataFrame) -> None:
        """Store ``df`` under ``name``, replacing any previous value."""
        if name in self.datasets:
            logger.debug("Replacing dataset '%s'.", name)
        self.datasets[name] = df

    def remove(self, name: str) -> pd.DataFrame:
        """Remove and return the dataset stored under ``name``."""
        if name not in self.datasets:
            raise KeyError(f"Unknown dataset '{name}'.")
        return self.datasets.pop(name)

    def names(self) -> list[str]:
        return list(self.datasets)

    def add_binary_column(self, df_name: str, column_name: str, value: object) -> None:
        """Add a ``f"{value}_binary"`` indicator column to the dataset stored as ``df_name``."""
        from .binary_columns import add_binary_column_in

        add_binary_column_in(df_name, column_name, value, namespace=self)

    def __getitem__(self, name: str) -> pd.DataFrame:
        return self.get(name)

    def __setitem__(self, name: str, df: pd.DataFrame) -> None:
        self.set(name, df)

    def __delitem__(self, name: str) -> None:
        self.remove(name)

    def __contains__(self, name: object) -> bool:
        return name in self.datasets

    def __iter__(self) -> Iterator[str]:
        return iter(self.datasets)

    def __len__(self) -> int:
        return len(self.datasets)


# Shared namespace used when no explicit one is passed
DEFAULT_NAMESPACE = DatasetNamespace()


__all__ = ["DEFAULT_NAMESPACE", "DatasetNamespace"]
