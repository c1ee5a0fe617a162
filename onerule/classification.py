from typing import Any
from typing import Hashable
from typing import Iterable
from typing import Optional
from typing import Type

import numpy as np
import pandas as pd
from decision_rules.classification import ClassificationConclusion
from decision_rules.classification import ClassificationRule
from decision_rules.classification import ClassificationRuleSet
from decision_rules.conditions import CompoundCondition
from decision_rules.conditions import LogicOperators
from decision_rules.conditions import NominalCondition
from sklearn.base import BaseEstimator
from sklearn.base import ClassifierMixin
from sklearn.utils.validation import check_is_fitted

from onerule import _helpers
from onerule import evaluation
from onerule._induction import RuleInducer
from onerule._induction import zero_rule
from onerule._params import DEFAULT_PARAMS_VALUES
from onerule._params import QualityMeasure
from onerule._params import validate_params
from onerule._timing import RuleInductionTimes
from onerule._types import Rule


class OneRClassifier(ClassifierMixin, BaseEstimator):
    """Classifier based on the 1R algorithm (Holte, 1993). It builds a rule for
    every attribute and keeps the single one with the best training accuracy:
        IF a = v1 THEN label = c1; IF a = v2 THEN label = c2; ...

    It is meant as a baseline for more sophisticated rule learners. Attributes are
    treated as nominal, numerical ones should be discretized beforehand.
    """

    _Inducer: Type[RuleInducer] = RuleInducer

    def __init__(
        self,
        n_jobs: Optional[int] = DEFAULT_PARAMS_VALUES["n_jobs"],
        fallback: str = DEFAULT_PARAMS_VALUES["fallback"],
        voting_measure: QualityMeasure = DEFAULT_PARAMS_VALUES["voting_measure"],
    ):
        """
        Args:
            n_jobs (Optional[int], optional): Number of parallel jobs used to
                generate rules for attributes. Defaults to
                DEFAULT_PARAMS_VALUES["n_jobs"].
            fallback (str, optional): What to predict for attribute values unseen
                during training: "majority" predicts the most frequent training
                class, "none" predicts None. Defaults to
                DEFAULT_PARAMS_VALUES["fallback"].
            voting_measure (QualityMeasure, optional): Quality measure used for
                voting weights of rules exported with :code:`to_ruleset`. Defaults
                to DEFAULT_PARAMS_VALUES["voting_measure"].
        """
        # pylint: disable=unused-argument
        params: dict = locals()
        params.pop("self")
        self._params: dict[str, Any] = validate_params(params)
        self.induction_times: RuleInductionTimes = None
        self._inducer: RuleInducer = None

    def set_params(self, **params):
        self._params = validate_params({**self._params, **params})
        return self

    def get_params(self, deep=True) -> dict:
        return dict(self._params)

    def fit(self, X: Any, y: Iterable[Hashable]):
        """Finds the best single attribute rule for given data.

        Args:
            X (Any): dataset, pandas DataFrame or row-major table of nominal values
            y (Iterable[Hashable]): label column

        Raises:
            ValueError: if dataset has no attributes
            ShapeMismatchError: if number of rows and labels differ

        Returns:
            OneRClassifier: fitted estimator
        """
        X_np, columns_names = _helpers.as_matrix(X)
        y_np: np.ndarray = _helpers.as_vector(y)
        _helpers.check_same_length(X_np.shape[0], y_np.shape[0])
        if X_np.shape[1] == 0:
            raise ValueError("Cannot induce rules for a dataset without attributes")

        self._inducer = self._Inducer(self._params)  # pylint: disable=not-callable
        best: Optional[tuple[int, Rule]] = self._inducer.induce(
            X_np, y_np, columns_names
        )
        if best is None:
            raise ValueError("None of the attributes yields a rule with valid accuracy")

        self.attribute_index_, self.rule_ = best
        self.attribute_name_: Hashable = columns_names[self.attribute_index_]
        self.columns_names_: list[Hashable] = columns_names
        self.n_features_in_: int = X_np.shape[1]
        self.hypotheses_: list[Rule] = self._inducer.hypotheses
        self.default_class_: Optional[Hashable] = zero_rule(y_np)
        self.classes_: np.ndarray = _helpers.as_vector(dict.fromkeys(y_np))
        self.decision_attribute_: Optional[Hashable] = (
            y.name if isinstance(y, pd.Series) else None
        )
        self.induction_times = self._inducer.induction_times
        return self

    def _attribute_column(self, X: Any) -> np.ndarray:
        X_np, _ = _helpers.as_matrix(X)
        if X_np.shape[1] != self.n_features_in_:
            raise ValueError(
                f"X has {X_np.shape[1]} attributes, but {self.__class__.__name__} "
                f"was fitted with {self.n_features_in_}"
            )
        return X_np[:, self.attribute_index_]

    def _predict_with_mask(self, X: Any) -> tuple[np.ndarray, np.ndarray]:
        check_is_fitted(self, "rule_")
        default: Optional[Hashable] = (
            self.default_class_ if self._params["fallback"] == "majority" else None
        )
        predictions, matched_mask = evaluation.predict_with_mask(
            self.rule_.cases, self._attribute_column(X), default=default
        )
        # unseen values count as predicted only when a fallback class exists
        predicted_mask: np.ndarray = matched_mask | (default is not None)
        return predictions, predicted_mask

    def predict(self, X: Any) -> np.ndarray:
        """
        Args:
            X (Any): dataset with the same attributes as the training one

        Returns:
            np.ndarray: predictions (dtype object)
        """
        predictions, _ = self._predict_with_mask(X)
        return predictions

    def score(self, X: Any, y: Iterable[Hashable], sample_weight=None) -> float:
        """Fraction of correctly classified examples. Examples left without a
        prediction (unseen values with :code:`fallback="none"`) are counted as
        incorrect, whatever their label.
        """
        y_np: np.ndarray = _helpers.as_vector(y)
        y_pred, predicted_mask = self._predict_with_mask(X)
        _helpers.check_same_length(y_pred.shape[0], y_np.shape[0])
        if y_np.shape[0] == 0:
            return 0.0
        correct: np.ndarray = predicted_mask & (y_pred == y_np).astype(bool)
        return float(np.average(correct, weights=sample_weight))

    def to_ruleset(self, X: Any, y: Iterable[Hashable]) -> ClassificationRuleSet:
        """Exports the selected rule as a ruleset from `decision_rules
        <https://github.com/ruleminer/decision-rules>`_ package. Each case becomes a
        separate rule with a single nominal condition. The ruleset is updated
        (coverages and voting weights) on given data.

        Args:
            X (Any): dataset, usually the training one
            y (Iterable[Hashable]): label column

        Returns:
            ClassificationRuleSet: ruleset ready for prediction
        """
        check_is_fitted(self, "rule_")
        X_np, _ = _helpers.as_matrix(X)
        y_np: np.ndarray = _helpers.as_vector(y)
        _helpers.check_same_length(X_np.shape[0], y_np.shape[0])
        column_names: list[str] = [str(name) for name in self.columns_names_]
        decision_attribute: str = (
            str(self.decision_attribute_)
            if self.decision_attribute_ is not None
            else "class"
        )

        rules: list[ClassificationRule] = [
            ClassificationRule(
                premise=CompoundCondition(
                    subconditions=[
                        NominalCondition(
                            column_index=self.attribute_index_,
                            value=case.attribute_value,
                        )
                    ],
                    logic_operator=LogicOperators.CONJUNCTION,
                ),
                conclusion=ClassificationConclusion(
                    value=case.predicted_class, column_name=decision_attribute
                ),
                column_names=column_names,
            )
            for case in self.rule_.cases
        ]
        ruleset = ClassificationRuleSet(rules=rules)
        ruleset.update(
            pd.DataFrame(X_np, columns=column_names),
            pd.Series(y_np, name=decision_attribute),
            self._params["voting_measure"],
        )
        ruleset.decision_attribute = decision_attribute
        return ruleset
