"""Binary indicator columns derived from a target value."""

from __future__ import annotations

import logging
import numbers
from collections.abc import MutableMapping
from typing import Any

import numpy as np
import pandas as pd

from .namespace import DEFAULT_NAMESPACE


logger = logging.getLogger(__name__)

BINARY_SUFFIX = "_binary"


def binary_column_name(value: object) -> str:
    """Name of the indicator column for ``value``, e.g. ``"dog"`` -> ``"dog_binary"``."""
    return f"{value}{BINARY_SUFFIX}"


def _comparison_value(series: pd.Series, value: object) -> object:
    """Bring ``value`` into a form comparable with the elements of ``series``.

    Raises:
        TypeError: If a numeric/boolean column is compared against a non-numeric
            value, or a datetime column against a value that is not date-like.
    """
    if pd.api.types.is_datetime64_any_dtype(series):
        try:
            stamp = pd.Timestamp(value)
        except (TypeError, ValueError) as exc:
            raise TypeError(f"Cannot compare datetime column '{series.name}' with {value!r}.") from exc
        tz = series.dt.tz
        # Naive values are read in the column's timezone
        if tz is not None and stamp.tz is None:
            return stamp.tz_localize(tz)
        if tz is None and stamp.tz is not None:
            raise TypeError(
                f"Cannot compare timezone-naive column '{series.name}' with timezone-aware value {value!r}.",
            )
        return stamp
    if pd.api.types.is_numeric_dtype(series) and not isinstance(value, (numbers.Number, np.bool_)):
        raise TypeError(
            f"Cannot compare {series.dtype} column '{series.name}' with non-numeric value {value!r}.",
        )
    return value


def binary_indicator(series: pd.Series, value: object) -> pd.Series:
    """Return a 0/1 integer series flagging elements equal to ``value``.

    Missing values never match.
    """
    matches = series.eq(_comparison_value(series, value)).fillna(False)
    return matches.astype(int).rename(binary_column_name(value))


def add_binary_column(
    df: pd.DataFrame | str,
    column_name: str,
    value: object,
    namespace: MutableMapping[str, Any] | None = None,
) -> pd.DataFrame | None:
    """Return a copy of ``df`` with a binary indicator column for ``value``.

    The new column is named ``f"{value}_binary"`` and holds 1 where
    ``df[column_name] == value`` and 0 otherwise. An existing column of the same
    name is overwritten in place, so repeated calls do not accumulate columns.
    ``df`` itself is left unmodified.

    If ``df`` is a string it is taken as the name of a DataFrame stored in
    ``namespace`` and the call is delegated to :func:`add_binary_column_in`,
    which updates the stored DataFrame and returns None.

    Args:
        df: Input DataFrame, or the name of a stored one.
        column_name: Column to compare against ``value``.
        value: Scalar to look for.
        namespace: Only used when ``df`` is a name; defaults to ``DEFAULT_NAMESPACE``.

    Returns:
        New DataFrame with the indicator column, or None when ``df`` is a name.

    Raises:
        KeyError: If ``column_name`` is not a column of ``df`` (or ``df`` is an
            unknown name).
        TypeError: If ``value`` cannot be compared with the column's dtype.

    Example:
        >>> df = pd.DataFrame({"observation": ["bird", "dog", "cat", "dog"]})
        >>> add_binary_column(df, "observation", "dog")["dog_binary"].tolist()
        [0, 1, 0, 1]
    """
    if isinstance(df, str):
        add_binary_column_in(df, column_name, value, namespace=namespace)
        return None

    if column_name not in df.columns:
        raise KeyError(f"Column '{column_name}' not found in DataFrame.")

    indicator = binary_indicator(df[column_name], value)
    return df.assign(**{indicator.name: indicator})


def add_binary_column_in(
    df_name: str,
    column_name: str,
    value: object,
    namespace: MutableMapping[str, Any] | None = None,
) -> None:
    """Add a binary indicator column to a DataFrame stored by name.

    Looks ``df_name`` up in ``namespace``, applies :func:`add_binary_column` and
    stores the result back under the same name. Any mutable mapping works as a
    namespace, e.g. a notebook's ``globals()``.

    Args:
        df_name: Name under which the DataFrame is stored.
        column_name: Column to compare against ``value``.
        value: Scalar to look for.
        namespace: Where the DataFrame lives; defaults to ``DEFAULT_NAMESPACE``.

    Raises:
        KeyError: If ``df_name`` is not in the namespace or ``column_name`` is
            not a column of the stored DataFrame. Nothing is written in either case.
        TypeError: If the stored object is not a DataFrame, or ``value`` cannot be
            compared with the column's dtype.
    """
    ns = DEFAULT_NAMESPACE if namespace is None else namespace
    if df_name not in ns:
        raise KeyError(f"Unknown dataset '{df_name}'.")

    df = ns[df_name]
    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"'{df_name}' is a {type(df).__name__}, not a pandas DataFrame.")

    updated = add_binary_column(df, column_name, value)
    ns[df_name] = updated
    logger.debug(
        "Added column '%s' to dataset '%s' (%d of %d rows match).",
        binary_column_name(value),
        df_name,
        int(updated[binary_column_name(value)].sum()),
        len(updated),
    )
