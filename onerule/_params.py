from typing import Callable
from typing import Literal
from typing import Optional
from typing import TypeAlias
from typing import TypedDict

from decision_rules import measures
from decision_rules.core.coverage import Coverage

QualityMeasure: TypeAlias = Callable[[Coverage], float]

FALLBACK_STRATEGIES: tuple[str, ...] = ("majority", "none")


class AlgorithmParams(TypedDict):
    n_jobs: Optional[int]
    fallback: Literal["majority", "none"]
    voting_measure: QualityMeasure


DEFAULT_PARAMS_VALUES: AlgorithmParams = AlgorithmParams(
    n_jobs=None,
    fallback="majority",
    voting_measure=measures.c2,
)


def validate_params(params: AlgorithmParams) -> AlgorithmParams:
    """Fills missing parameters with defaults and checks their values.

    Args:
        params (AlgorithmParams): algorithm parameters, possibly incomplete

    Raises:
        ValueError: if any parameter has an invalid value

    Returns:
        AlgorithmParams: complete copy of the parameters
    """
    validated: AlgorithmParams = DEFAULT_PARAMS_VALUES.copy()
    validated.update(params)
    if validated["fallback"] not in FALLBACK_STRATEGIES:
        raise ValueError(
            f"Unknown fallback strategy: {validated['fallback']}, "
            f"expected one of {FALLBACK_STRATEGIES}"
        )
    if validated["n_jobs"] == 0:
        raise ValueError("n_jobs == 0 has no meaning, use None or a nonzero integer")
    if not callable(validated["voting_measure"]):
        raise TypeError("voting_measure must be a callable accepting Coverage")
    return validated
