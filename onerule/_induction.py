from __future__ import annotations

import math
from logging import Logger
from logging import getLogger
from typing import Any
from typing import Hashable
from typing import Iterable
from typing import Optional
from typing import Sequence

import numpy as np
from joblib import Parallel
from joblib import delayed

from onerule import _helpers
from onerule._params import AlgorithmParams
from onerule._params import validate_params
from onerule._timing import PerformanceTimer
from onerule._timing import RuleInductionTimes
from onerule._types import Case
from onerule._types import Rule
from onerule.evaluation import evaluate


def _most_frequent(counts: dict[Hashable, int]) -> Hashable:
    # strict comparison keeps the earliest inserted class on ties
    best_value, best_count = None, -1
    for value, count in counts.items():
        if count > best_count:
            best_value, best_count = value, count
    return best_value


def zero_rule(classes: Iterable[Hashable]) -> Optional[Hashable]:
    """The 0R baseline: the most frequent class in the data set.

    Ties are resolved in favour of the class seen first.

    Args:
        classes (Iterable[Hashable]): classes of all examples

    Returns:
        Optional[Hashable]: most frequent class or None if there are no examples
    """
    counts: dict[Hashable, int] = {}
    for class_value in _helpers.as_vector(classes):
        counts[class_value] = counts.get(class_value, 0) + 1
    if len(counts) == 0:
        return None
    return _most_frequent(counts)


def generate_rule_for_attribute(
    attribute_values: Iterable[Hashable], classes: Iterable[Hashable]
) -> Rule:
    """Generate a rule based on a single attribute.

    For each distinct attribute value the prediction is the most frequent class
    among examples having that value. Cases follow the order in which attribute
    values first appear; when classes tie, the one seen first among the examples
    with that value wins.

    Args:
        attribute_values (Iterable[Hashable]): value of the attribute for each example
        classes (Iterable[Hashable]): true class for each example

    Raises:
        ShapeMismatchError: if both arguments differ in length

    Returns:
        Rule: rule with its accuracy on the given (training) data
    """
    attribute_values = _helpers.as_vector(attribute_values)
    classes = _helpers.as_vector(classes)
    _helpers.check_same_length(
        attribute_values.shape[0], classes.shape[0], what="attribute values"
    )

    # both levels are insertion ordered dicts
    class_counts: dict[Hashable, dict[Hashable, int]] = {}
    for attribute_value, class_value in zip(attribute_values, classes):
        value_counts: dict[Hashable, int] = class_counts.setdefault(attribute_value, {})
        value_counts[class_value] = value_counts.get(class_value, 0) + 1

    cases: list[Case] = [
        Case(attribute_value=value, predicted_class=_most_frequent(counts))
        for value, counts in class_counts.items()
    ]
    return Rule(
        cases=tuple(cases), accuracy=evaluate(cases, attribute_values, classes)
    )


def generate_hypotheses(
    attributes: Any, classes: Iterable[Hashable], n_jobs: Optional[int] = None
) -> list[Rule]:
    """Generate one rule for every attribute (column).

    Args:
        attributes (Any): rows of attribute values; a pandas DataFrame, two
            dimensional numpy array or a sequence of rows
        classes (Iterable[Hashable]): true class for each row
        n_jobs (Optional[int], optional): number of parallel jobs used to generate
            rules, passed to joblib. None or 1 generates rules sequentially.
            Defaults to None.

    Raises:
        ShapeMismatchError: if number of rows and number of classes differ

    Returns:
        list[Rule]: rules in columns order
    """
    X, _ = _helpers.as_matrix(attributes)
    y: np.ndarray = _helpers.as_vector(classes)
    _helpers.check_same_length(X.shape[0], y.shape[0])
    return _generate_hypotheses(X, y, n_jobs)


def _generate_hypotheses(
    X: np.ndarray, y: np.ndarray, n_jobs: Optional[int]
) -> list[Rule]:
    if n_jobs is None or n_jobs == 1 or X.shape[1] < 2:
        return [generate_rule_for_attribute(X[:, i], y) for i in range(X.shape[1])]
    # joblib returns results in the order of submitted tasks
    return Parallel(n_jobs=n_jobs, prefer="processes")(
        delayed(generate_rule_for_attribute)(X[:, i], y) for i in range(X.shape[1])
    )


def select_best_rule(rules: Sequence[Rule]) -> Optional[tuple[int, Rule]]:
    """Select the rule with the highest accuracy.

    Columns are scanned from left to right and a rule replaces the current best
    only when its accuracy is strictly higher, so the lowest index wins ties.
    Rules with NaN accuracy are never selected.

    Args:
        rules (Sequence[Rule]): rules in columns order

    Returns:
        Optional[tuple[int, Rule]]: column index and its rule or None when there is
            nothing to select from
    """
    best: Optional[tuple[int, Rule]] = None
    for index, rule in enumerate(rules):
        accuracy: float = float(rule.accuracy)
        if math.isnan(accuracy):
            continue
        if best is None or accuracy > float(best[1].accuracy):
            best = (index, rule)
    return best


def discover(
    attributes: Any, classes: Iterable[Hashable], n_jobs: Optional[int] = None
) -> Optional[tuple[int, Rule]]:
    """Find the one rule that fits a set of examples best.

    Example:
    >>> attributes = [
    ...     ["sunny", "summer"],
    ...     ["sunny", "summer"],
    ...     ["cloudy", "winter"],
    ...     ["sunny", "winter"],
    ... ]
    >>> index, rule = discover(attributes, ["hot", "hot", "cold", "cold"])
    >>> index, rule.to_dict(), float(rule.accuracy)
    (1, {'summer': 'hot', 'winter': 'cold'}, 1.0)

    Args:
        attributes (Any): rows of attribute values; a pandas DataFrame, two
            dimensional numpy array or a sequence of rows
        classes (Iterable[Hashable]): true class for each row
        n_jobs (Optional[int], optional): number of parallel jobs used to generate
            rules. Defaults to None.

    Raises:
        ShapeMismatchError: if number of rows and number of classes differ

    Returns:
        Optional[tuple[int, Rule]]: zero based column index and the rule for it,
            None if there are no columns
    """
    return select_best_rule(generate_hypotheses(attributes, classes, n_jobs=n_jobs))


class RuleInducer:
    """Runs the 1R algorithm measuring its times and logging its progress"""

    def __init__(self, params: AlgorithmParams):
        self.params: AlgorithmParams = validate_params(params)
        self.logger: Logger = getLogger(self.__class__.__name__)
        self.induction_times: RuleInductionTimes = RuleInductionTimes()
        self.hypotheses: list[Rule] = []

    def induce(
        self, X: np.ndarray, y: np.ndarray, columns_names: Optional[list] = None
    ) -> Optional[tuple[int, Rule]]:
        """Generates rules for all attributes and selects the best one

        Args:
            X (np.ndarray): attributes matrix
            y (np.ndarray): classes
            columns_names (Optional[list], optional): used for logging only.
                Defaults to None.

        Returns:
            Optional[tuple[int, Rule]]: column index and its rule
        """
        if columns_names is None:
            columns_names = list(range(X.shape[1]))
        _helpers.check_same_length(X.shape[0], y.shape[0])

        with PerformanceTimer() as total_timer:
            self.logger.info(
                "Generating rules for %d attributes and %d examples",
                X.shape[1],
                X.shape[0],
            )
            with PerformanceTimer() as timer:
                self.hypotheses = _generate_hypotheses(X, y, self.params["n_jobs"])
            self.induction_times.generation_time += timer.timedelta
            for name, rule in zip(columns_names, self.hypotheses):
                self.logger.debug('Rule for attribute "%s": %s', name, str(rule))

            with PerformanceTimer() as timer:
                best: Optional[tuple[int, Rule]] = select_best_rule(self.hypotheses)
            self.induction_times.selection_time += timer.timedelta
        self.induction_times.total_training_time += total_timer.timedelta

        if best is None:
            self.logger.info("No attributes to induce rules for")
        else:
            self.logger.info(
                'Selected attribute "%s" with accuracy = %f',
                columns_names[best[0]],
                float(best[1].accuracy),
            )
        return best
