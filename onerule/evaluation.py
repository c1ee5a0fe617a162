"""Contains functions for applying cases (a rule) to data and assessing their
accuracy.
"""
from typing import Hashable
from typing import Iterable
from typing import Optional
from typing import Sequence

import numpy as np

from onerule import _helpers
from onerule._types import Accuracy
from onerule._types import Case


def interpret(cases: Sequence[Case], attribute_value: Hashable) -> Optional[Hashable]:
    """Apply a set of cases to an attribute value to get a prediction.

    Example:
    >>> cases = [Case("summer", "hot"), Case("winter", "cold")]
    >>> interpret(cases, "summer")
    'hot'
    >>> interpret(cases, "spring") is None
    True

    Missing values (None, NaN) are all considered equal to each other.

    Args:
        cases (Sequence[Case]): cases of a rule
        attribute_value (Hashable): value to look up

    Returns:
        Optional[Hashable]: predicted class of the first matching case or None if
            no case matches
    """
    attribute_value = _missing_as_none(attribute_value)
    for case in cases:
        if _missing_as_none(case.attribute_value) == attribute_value:
            return case.predicted_class
    return None


def _missing_as_none(value: Hashable) -> Hashable:
    return None if _helpers.is_missing(value) else value


def _lookup_table(cases: Iterable[Case]) -> dict[Hashable, Hashable]:
    table: dict[Hashable, Hashable] = {}
    for case in cases:
        # first case wins, same as in interpret
        table.setdefault(_missing_as_none(case.attribute_value), case.predicted_class)
    return table


def predict_with_mask(
    cases: Iterable[Case], attribute_values: np.ndarray, default: Optional[Hashable]
) -> tuple[np.ndarray, np.ndarray]:
    """Like :code:`predict`, also returning the mask of values matched by a case.
    Expects attribute values already converted with :code:`_helpers.as_vector`.
    """
    table: dict[Hashable, Hashable] = _lookup_table(cases)
    predictions: np.ndarray = np.empty(attribute_values.shape[0], dtype=object)
    matched_mask: np.ndarray = np.zeros(attribute_values.shape[0], dtype=bool)
    for i, value in enumerate(attribute_values):
        if value in table:
            predictions[i] = table[value]
            matched_mask[i] = True
        else:
            predictions[i] = default
    return predictions, matched_mask


def predict(
    cases: Iterable[Case],
    attribute_values: Iterable[Hashable],
    default: Optional[Hashable] = None,
) -> np.ndarray:
    """Apply cases to every given attribute value.

    Args:
        cases (Iterable[Case]): cases of a rule
        attribute_values (Iterable[Hashable]): values of the rule attribute
        default (Optional[Hashable], optional): prediction for values not matched by
            any case. Defaults to None.

    Returns:
        np.ndarray: predictions (dtype object)
    """
    predictions, _ = predict_with_mask(
        cases, _helpers.as_vector(attribute_values), default
    )
    return predictions


def evaluate(
    cases: Iterable[Case],
    attribute_values: Iterable[Hashable],
    classes: Iterable[Hashable],
) -> Accuracy:
    """Evaluate cases (a.k.a. a rule) against a data set to get its accuracy.

    Accuracy is the number of correct predictions over the number of rows. Rows
    whose attribute value is not matched by any case count as incorrect. Accuracy
    of an empty data set is 0.0.

    Args:
        cases (Iterable[Case]): cases of a rule
        attribute_values (Iterable[Hashable]): value of the attribute for each row
        classes (Iterable[Hashable]): true class for each row

    Raises:
        ShapeMismatchError: if attribute values and classes differ in length

    Returns:
        Accuracy: fraction of correctly predicted rows
    """
    attribute_values = _helpers.as_vector(attribute_values)
    classes = _helpers.as_vector(classes)
    _helpers.check_same_length(
        attribute_values.shape[0], classes.shape[0], what="attribute values"
    )
    examples_count: int = classes.shape[0]
    if examples_count == 0:
        return Accuracy(0.0)

    predictions, matched_mask = predict_with_mask(
        cases, attribute_values, default=None
    )
    correct_mask: np.ndarray = matched_mask & (predictions == classes).astype(bool)
    return Accuracy(np.count_nonzero(correct_mask) / examples_count)
