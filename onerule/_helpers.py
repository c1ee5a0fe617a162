from typing import Any
from typing import Hashable
from typing import Iterable

import numpy as np
import pandas as pd

from onerule.exceptions import ShapeMismatchError


def is_missing(value: Any) -> bool:
    """Whether value is a missing value (None, NaN, NaT or pd.NA)."""
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def _replace_missing(array: np.ndarray) -> np.ndarray:
    # every NaN is a distinct object which breaks grouping by value
    array[pd.isna(array)] = None
    return array


def as_vector(values: Iterable[Hashable]) -> np.ndarray:
    """Convert given values into one dimensional numpy array of python objects.

    Elements are assigned one by one so that values which are sequences themselves
    (e.g. tuples) are kept as single elements instead of being broadcasted. Missing
    values are replaced with None.

    Args:
        values (Iterable[Hashable]): list, tuple, numpy array or pandas Series

    Returns:
        np.ndarray: array of dtype object
    """
    if isinstance(values, pd.Series):
        return _replace_missing(values.to_numpy(dtype=object, copy=True))
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValueError(
                f"Expected one dimensional array of values, got shape {values.shape}"
            )
        return _replace_missing(values.astype(object))
    values = list(values)
    vector: np.ndarray = np.empty(len(values), dtype=object)
    for i, value in enumerate(values):
        vector[i] = value
    return _replace_missing(vector)


def as_matrix(attributes: Any) -> tuple[np.ndarray, list[Hashable]]:
    """Convert row-major attributes table into two dimensional numpy array of
    python objects.

    Args:
        attributes (Any): pandas DataFrame, two dimensional numpy array or sequence
            of rows

    Raises:
        ValueError: if rows have different lengths or array is not two dimensional

    Returns:
        tuple[np.ndarray, list[Hashable]]: matrix and its columns labels (dataframe
            columns or plain indices). Missing values are replaced
            with None
    """
    if isinstance(attributes, pd.DataFrame):
        return (
            _replace_missing(attributes.to_numpy(dtype=object, copy=True)),
            list(attributes.columns),
        )
    if isinstance(attributes, np.ndarray):
        if attributes.ndim != 2:
            raise ValueError(
                f"Expected two dimensional attributes array, got shape {attributes.shape}"
            )
        return _replace_missing(attributes.astype(object)), list(
            range(attributes.shape[1])
        )

    rows: list[list[Hashable]] = [list(row) for row in attributes]
    columns_count: int = len(rows[0]) if len(rows) > 0 else 0
    for i, row in enumerate(rows):
        if len(row) != columns_count:
            raise ValueError(
                f"Row {i} has {len(row)} attribute values, expected {columns_count}"
            )
    matrix: np.ndarray = np.empty((len(rows), columns_count), dtype=object)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            matrix[i, j] = value
    return _replace_missing(matrix), list(range(columns_count))


def check_same_length(rows_count: int, classes_count: int, what: str = "attributes"):
    if rows_count != classes_count:
        raise ShapeMismatchError(rows_count, classes_count, what=what)
