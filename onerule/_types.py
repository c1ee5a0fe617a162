"""Value types produced by the 1R algorithm.

In generic terms `A` is the type of an attribute value and `C` is the type of a
class. Both only need to support equality and hashing.
"""
from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Generic
from typing import Hashable
from typing import Optional
from typing import TypeVar

A = TypeVar("A", bound=Hashable)
C = TypeVar("C", bound=Hashable)


class Accuracy(float):
    """Fraction of correct predictions out of all rows in the training data."""

    def __new__(cls, value: float = 0.0) -> Accuracy:
        value = float(value)
        if value < 0.0 or value > 1.0:
            raise ValueError(f"Accuracy must lie in [0.0, 1.0], got {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Accuracy({float(self)!r})"


@dataclass(frozen=True)
class Case(Generic[A, C]):
    """A prediction based on an attribute value: IF attribute = value THEN class"""

    attribute_value: A
    predicted_class: C

    def __str__(self) -> str:
        return f"IF {self.attribute_value} THEN {self.predicted_class}"


@dataclass(frozen=True)
class Rule(Generic[A, C]):
    """The cases for a single attribute, together with the training data accuracy.

    Cases are kept in the order in which their attribute values were first seen
    in the training data.
    """

    cases: tuple[Case[A, C], ...] = field(default_factory=tuple)
    accuracy: Accuracy = field(default_factory=Accuracy)

    def __post_init__(self):
        # frozen dataclass, hence object.__setattr__
        object.__setattr__(self, "cases", tuple(self.cases))
        if not isinstance(self.accuracy, Accuracy):
            object.__setattr__(self, "accuracy", Accuracy(self.accuracy))
        seen: set = set()
        for case in self.cases:
            if case.attribute_value in seen:
                raise ValueError(
                    f"Duplicated attribute value in rule cases: {case.attribute_value!r}"
                )
            seen.add(case.attribute_value)

    @property
    def attribute_values(self) -> list[A]:
        return [case.attribute_value for case in self.cases]

    def predict(self, attribute_value: A) -> Optional[C]:
        from onerule.evaluation import interpret  # pylint: disable=import-outside-toplevel

        return interpret(self.cases, attribute_value)

    def to_dict(self) -> dict[A, C]:
        """Returns:
        dict[A, C]: mapping from attribute value to predicted class, in cases order
        """
        return {case.attribute_value: case.predicted_class for case in self.cases}

    def __len__(self) -> int:
        return len(self.cases)

    def __str__(self) -> str:
        cases_str: str = "; ".join(str(case) for case in self.cases)
        return f"[{cases_str}] (accuracy = {float(self.accuracy):.4f})"

