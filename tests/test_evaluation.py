import numpy as np
import pandas as pd
import pytest

from onerule import Accuracy
from onerule import Case
from onerule import ShapeMismatchError
from onerule import evaluate
from onerule import interpret
from onerule import predict


@pytest.fixture
def season_cases() -> list[Case]:
    return [
        Case(attribute_value="summer", predicted_class="hot"),
        Case(attribute_value="winter", predicted_class="cold"),
    ]


def test_interpret_matching_value(season_cases: list[Case]):
    assert interpret(season_cases, "summer") == "hot"
    assert interpret(season_cases, "winter") == "cold"


def test_interpret_unknown_value(season_cases: list[Case]):
    assert interpret(season_cases, "spring") is None
    assert interpret([], "summer") is None


def test_interpret_first_case_wins_on_duplicates():
    cases = [Case("a", "first"), Case("a", "second")]
    assert interpret(cases, "a") == "first"


def test_interpret_uses_equality_only():
    cases = [Case("Summer", "hot")]
    assert interpret(cases, "summer") is None
    assert interpret(cases, "Summ") is None


def test_evaluate(season_cases: list[Case]):
    accuracy = evaluate(
        season_cases,
        ["summer", "summer", "winter", "winter"],
        ["hot", "cold", "cold", "cold"],
    )
    assert isinstance(accuracy, Accuracy)
    assert accuracy == 0.75


def test_evaluate_counts_unmatched_as_incorrect(season_cases: list[Case]):
    accuracy = evaluate(season_cases, ["summer", "spring"], ["hot", "hot"])
    assert accuracy == 0.5


def test_evaluate_unmatched_value_never_matches_none_class(season_cases: list[Case]):
    assert evaluate(season_cases, ["spring"], [None]) == 0.0


def test_evaluate_empty_dataset(season_cases: list[Case]):
    assert evaluate(season_cases, [], []) == Accuracy(0.0)
    assert evaluate([], [], []) == 0.0


def test_evaluate_accepts_numpy_and_pandas(season_cases: list[Case]):
    values = np.array(["summer", "winter"])
    classes = pd.Series(["hot", "cold"])
    assert evaluate(season_cases, values, classes) == 1.0


def test_evaluate_shape_mismatch(season_cases: list[Case]):
    with pytest.raises(ShapeMismatchError):
        evaluate(season_cases, ["summer", "winter"], ["hot"])


def test_evaluate_is_within_bounds():
    rng = np.random.default_rng(0)
    cases = [Case(int(v), int(c)) for v, c in zip(range(5), rng.integers(0, 3, 5))]
    for _ in range(20):
        values = rng.integers(0, 7, 30).tolist()
        classes = rng.integers(0, 3, 30).tolist()
        accuracy = evaluate(cases, values, classes)
        assert 0.0 <= accuracy <= 1.0


def test_predict(season_cases: list[Case]):
    predictions = predict(season_cases, ["winter", "spring", "summer"])
    assert predictions.tolist() == ["cold", None, "hot"]

    predictions = predict(season_cases, ["spring"], default="mild")
    assert predictions.tolist() == ["mild"]


def test_tuple_attribute_values_are_kept_whole():
    cases = [Case(("a", 1), "x"), Case(("b", 2), "y")]
    assert evaluate(cases, [("a", 1), ("b", 2), ("a", 2)], ["x", "y", "x"]) == 2 / 3


def test_missing_values_are_equal_to_each_other():
    cases = [Case(float("nan"), "q"), Case("a", "p")]
    assert interpret(cases, None) == "q"
    assert interpret(cases, float("nan")) == "q"
    assert interpret([Case(None, "q")], np.nan) == "q"
    assert evaluate([Case(None, "q")], [np.nan, None, pd.NA], ["q", "q", "p"]) == 2 / 3
