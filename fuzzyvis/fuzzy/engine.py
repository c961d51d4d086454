"""
Fuzzy engine for crisp variables.

The engine evaluates every fuzzy set of a crisp variable, either at a single
crisp value (fuzzification) or across the whole domain (chart sampling).
When a set's parameters are rejected by its membership function the engine
substitutes 0 for that point instead of failing the whole evaluation.

Example:
    ```python
    variable = FuzzyConfigLoader().load_from_yaml("fuzzy.yaml")
    engine = FuzzyEngine(variable)

    engine.fuzzify(42.0)
    # {"cold": 0.0, "warm": 0.84, "hot": 0.16}

    engine.sample(resolution=4)
    #        x  cold  warm   hot
    # 0    0.0   1.0   0.0   0.0
    # ...
    ```
"""

import math
from typing import Optional

import numpy as np
import pandas as pd

from fuzzyvis import get_logger, log_performance
from fuzzyvis.config import get_sampling_settings
from fuzzyvis.errors import ErrorCodes, MembershipError, ProcessingError
from fuzzyvis.fuzzy.config import CrispVariableConfig, FuzzySetConfig
from fuzzyvis.logging import should_sample_log

# Set up module-level logger
logger = get_logger(__name__)

# Degree used when a set cannot be evaluated at a point
FALLBACK_DEGREE = 0.0


class FuzzyEngine:
    """
    Evaluates the fuzzy sets of one crisp variable.

    The engine keeps a reference to the variable configuration and holds no
    other state; re-create it (or call it again) after editing parameters.
    """

    def __init__(self, variable: CrispVariableConfig):
        """
        Initialize the engine.

        Args:
            variable: Validated crisp variable configuration
        """
        self._variable = variable
        logger.debug(
            f"Initialized FuzzyEngine for '{variable.name}' with {len(variable.fuzzy_sets)} sets"
        )

    @property
    def variable(self) -> CrispVariableConfig:
        return self._variable

    @property
    def set_ids(self) -> list[str]:
        return [fuzzy_set.id for fuzzy_set in self._variable.fuzzy_sets]

    def _get_set(self, set_id: str) -> FuzzySetConfig:
        fuzzy_set = self._variable.get_set(set_id)
        if fuzzy_set is None:
            raise ProcessingError(
                message=f"Unknown fuzzy set '{set_id}' for variable '{self._variable.name}'",
                error_code=ErrorCodes.PROC_UNKNOWN_SET,
                details={"set_id": set_id, "available": self.set_ids},
            )
        return fuzzy_set

    def _degree_or_fallback(self, fuzzy_set: FuzzySetConfig, x: float) -> float:
        try:
            return fuzzy_set.evaluate(x)
        except MembershipError as e:
            if should_sample_log(f"engine.fallback.{fuzzy_set.id}"):
                logger.debug(
                    f"Set '{fuzzy_set.id}' could not be evaluated at x={x} ({e}); using {FALLBACK_DEGREE}"
                )
            return FALLBACK_DEGREE

    def membership(self, set_id: str, x: float) -> float:
        """
        Evaluate one set strictly: membership errors propagate to the caller.

        Args:
            set_id: Fuzzy set identifier
            x: Crisp value

        Returns:
            Degree of membership in [0, 1]

        Raises:
            ProcessingError: If the set does not exist
            MembershipError: If the set's parameters are rejected
        """
        return self._get_set(set_id).evaluate(x)

    def fuzzify(self, x: float) -> dict[str, float]:
        """
        Membership degree of a crisp value in every set.

        Args:
            x: Crisp value

        Returns:
            Mapping set id -> degree, in set order; sets that fail to
            evaluate contribute 0.0
        """
        return {
            fuzzy_set.id: self._degree_or_fallback(fuzzy_set, x)
            for fuzzy_set in self._variable.fuzzy_sets
        }

    def best_match(self, x: float) -> Optional[str]:
        """
        Identifier of the set with the highest degree at ``x``.

        Ties resolve to the earliest set. Returns None when the variable has
        no sets.
        """
        degrees = self.fuzzify(x)
        if not degrees:
            return None
        return max(degrees.items(), key=lambda kv: kv[1])[0]

    def clamp(self, x: float) -> float:
        """Clamp ``x`` into the variable's domain."""
        return max(self._variable.min, min(self._variable.max, x))

    def sample_points(self, resolution: Optional[int] = None) -> np.ndarray:
        """
        Evenly spaced sample points across the domain, left to right.

        Produces ``step + 1`` points ``min + (i / step) * range`` with
        ``step = max(1, floor(resolution))``. A zero-width domain uses a
        range of 1; a domain too wide for its range to be a float blends
        the two bounds instead.

        Args:
            resolution: Number of intervals; defaults to the sampling settings

        Returns:
            1-D float array of sample points

        Raises:
            ProcessingError: If resolution is not a finite number
        """
        if resolution is None:
            resolution = get_sampling_settings().resolution
        if isinstance(resolution, bool) or not math.isfinite(resolution):
            raise ProcessingError(
                message=f"Invalid sampling resolution: {resolution}",
                error_code=ErrorCodes.PROC_INVALID_RESOLUTION,
                details={"resolution": resolution},
            )
        step = max(1, math.floor(resolution))
        vmin, vmax = self._variable.min, self._variable.max
        fractions = np.arange(step + 1, dtype=float) / step
        span = vmax - vmin
        if math.isinf(span):
            # Domain wider than the float range; blend the bounds instead
            return vmin * (1 - fractions) + vmax * fractions
        return vmin + fractions * (span or 1.0)

    @log_performance(threshold_ms=50)
    def sample(self, resolution: Optional[int] = None) -> pd.DataFrame:
        """
        Sample every set across the domain into a chart-ready table.

        Args:
            resolution: Number of intervals; defaults to the sampling settings

        Returns:
            DataFrame with column ``x`` followed by one column per set id;
            points where a set fails to evaluate hold 0.0
        """
        points = self.sample_points(resolution)
        data: dict[str, list[float]] = {"x": points.tolist()}
        for fuzzy_set in self._variable.fuzzy_sets:
            data[fuzzy_set.id] = [
                self._degree_or_fallback(fuzzy_set, x) for x in data["x"]
            ]

        logger.debug(
            f"Sampled {len(points)} points for '{self._variable.name}' across {len(self.set_ids)} sets"
        )
        return pd.DataFrame(data, columns=["x", *self.set_ids])
