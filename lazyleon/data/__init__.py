"""Data helpers: binary indicator columns and the shared dataset namespace."""

from .binary_columns import add_binary_column, add_binary_column_in, binary_column_name, binary_indicator
from .namespace import DEFAULT_NAMESPACE, DatasetNamespace


__all__ = [
    "DEFAULT_NAMESPACE",
    "DatasetNamespace",
    "add_binary_column",
    "add_binary_column_in",
    "binary_column_name",
    "binary_indicator",
]
