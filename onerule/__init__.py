"""
Package implementing the 1R (Holte, 1993) baseline rule learning algorithm.

A rule is generated for each attribute of a dataset: for every value of the
attribute the prediction is the most frequent class among examples having that
value. The "one rule" with the best training accuracy is then selected. It is
meant as a baseline to compare more sophisticated rule learners against.

Attributes are treated as nominal, numerical ones have to be discretized first.
"""
from onerule._induction import discover
from onerule._induction import generate_hypotheses
from onerule._induction import generate_rule_for_attribute
from onerule._induction import select_best_rule
from onerule._induction import zero_rule
from onerule._types import Accuracy
from onerule._types import Case
from onerule._types import Rule
from onerule.classification import OneRClassifier
from onerule.evaluation import evaluate
from onerule.evaluation import interpret
from onerule.evaluation import predict
from onerule.exceptions import ShapeMismatchError

__all__ = [
    "Accuracy",
    "Case",
    "Rule",
    "OneRClassifier",
    "ShapeMismatchError",
    "discover",
    "evaluate",
    "generate_hypotheses",
    "generate_rule_for_attribute",
    "interpret",
    "predict",
    "select_best_rule",
    "zero_rule",
]
