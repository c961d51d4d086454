"""
Catalogue of membership functions.

Each entry ties a catalogue key (e.g. "triangular") to its function, the
labels of its parameters, a display label and a factory for sensible
default parameters over a domain. Fuzzy set definitions store only the key
and the parameters; the function is resolved here at evaluation time.
"""

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from fuzzyvis import get_logger
from fuzzyvis.core.type_registry import Registry
from fuzzyvis.errors import (
    ErrorCodes,
    ParameterCountError,
    UnknownMembershipFunctionError,
)
from fuzzyvis.fuzzy import membership

# Set up module-level logger
logger = get_logger(__name__)


class MembershipKind(str, Enum):
    """Closed set of membership function keys."""

    TRIANGULAR = "triangular"
    TRAPEZOIDAL = "trapezoidal"
    GAUSSIAN = "gaussian"
    GENERALIZED_BELL = "generalizedBell"
    SIGMOID = "sigmoid"
    S_CURVE = "sCurve"
    Z_CURVE = "zCurve"
    PI_CURVE = "piCurve"
    LEFT_SHOULDER = "leftShoulder"
    RIGHT_SHOULDER = "rightShoulder"
    SINGLETON = "singleton"


@dataclass(frozen=True)
class MembershipSpec:
    """
    Description of one catalogue entry.

    Attributes:
        kind: Catalogue key
        label: Display label, e.g. "Triangular(a,b,c)"
        function: The membership function, called as function(x, *parameters)
        param_labels: Parameter names in call order (x excluded)
        defaults: Factory producing default parameters for a (min, max) domain
    """

    kind: MembershipKind
    label: str
    function: Callable[..., float]
    param_labels: tuple[str, ...]
    defaults: Callable[[float, float], list[float]]

    @property
    def key(self) -> str:
        return self.kind.value

    @property
    def arity(self) -> int:
        return len(self.param_labels)

    def default_parameters(self, vmin: float, vmax: float) -> list[float]:
        """Default parameters spread over the domain [vmin, vmax]."""
        return [float(p) for p in self.defaults(vmin, vmax)]

    def evaluate(self, x: float, parameters: Sequence[float]) -> float:
        """
        Evaluate the function after checking the parameter count.

        Args:
            x: Input value
            parameters: Shape parameters in call order

        Returns:
            Degree of membership in [0, 1]

        Raises:
            ParameterCountError: If len(parameters) does not match the arity
            MembershipError: If the function rejects the parameters
        """
        if len(parameters) != self.arity:
            raise ParameterCountError(
                message=(
                    f"{self.key}: expected {self.arity} parameters "
                    f"[{', '.join(self.param_labels)}], got {len(parameters)}"
                ),
                error_code=ErrorCodes.MF_INVALID_PARAMETER_COUNT,
                details={
                    "function": self.key,
                    "expected": self.arity,
                    "actual": len(parameters),
                },
            )
        return self.function(x, *parameters)


def _at(vmin: float, vmax: float, fraction: float) -> float:
    return vmin + (vmax - vmin) * fraction


def _mid(vmin: float, vmax: float) -> float:
    return (vmin + vmax) / 2


def _transition(vmin: float, vmax: float) -> list[float]:
    return [_at(vmin, vmax, 0.25), _at(vmin, vmax, 0.75)]


MEMBERSHIP_REGISTRY: Registry[MembershipSpec] = Registry("membership function")


def _register(spec: MembershipSpec, aliases: list[str]) -> None:
    declared = list(inspect.signature(spec.function).parameters)[1:]
    if len(declared) != spec.arity:
        raise ValueError(
            f"{spec.key}: param_labels {spec.param_labels} do not match {declared}"
        )
    MEMBERSHIP_REGISTRY.register(spec, spec.key, aliases=aliases)


_register(
    MembershipSpec(
        kind=MembershipKind.TRIANGULAR,
        label="Triangular(a,b,c)",
        function=membership.triangular,
        param_labels=("a", "b", "c"),
        defaults=lambda lo, hi: [lo, _mid(lo, hi), hi],
    ),
    aliases=["trimf", "triangle"],
)
_register(
    MembershipSpec(
        kind=MembershipKind.TRAPEZOIDAL,
        label="Trapezoid(a,b,c,d)",
        function=membership.trapezoidal,
        param_labels=("a", "b", "c", "d"),
        defaults=lambda lo, hi: [lo, _at(lo, hi, 0.25), _at(lo, hi, 0.75), hi],
    ),
    aliases=["trapmf", "trapezoid"],
)
_register(
    MembershipSpec(
        kind=MembershipKind.GAUSSIAN,
        label="Gaussian(μ,σ)",
        function=membership.gaussian,
        param_labels=("mu", "sigma"),
        defaults=lambda lo, hi: [_mid(lo, hi), (hi - lo) / 6],
    ),
    aliases=["gaussmf", "gauss"],
)
_register(
    MembershipSpec(
        kind=MembershipKind.GENERALIZED_BELL,
        label="Generalized Bell(a,b,c)",
        function=membership.generalized_bell,
        param_labels=("a", "b", "c"),
        defaults=lambda lo, hi: [max(1e-6, (hi - lo) / 6), 2, _mid(lo, hi)],
    ),
    aliases=["generalized_bell", "bell", "gbellmf"],
)
_register(
    MembershipSpec(
        kind=MembershipKind.SIGMOID,
        label="Sigmoid(a,c)",
        function=membership.sigmoid,
        param_labels=("a", "c"),
        defaults=lambda lo, hi: [1, _mid(lo, hi)],
    ),
    aliases=["sigmf"],
)
_register(
    MembershipSpec(
        kind=MembershipKind.S_CURVE,
        label="S-Curve(a,b)",
        function=membership.s_curve,
        param_labels=("a", "b"),
        defaults=_transition,
    ),
    aliases=["s_curve", "smf"],
)
_register(
    MembershipSpec(
        kind=MembershipKind.Z_CURVE,
        label="Z-Curve(a,b)",
        function=membership.z_curve,
        param_labels=("a", "b"),
        defaults=_transition,
    ),
    aliases=["z_curve", "zmf"],
)
_register(
    MembershipSpec(
        kind=MembershipKind.PI_CURVE,
        label="Pi Curve(a,b,c,d)",
        function=membership.pi_curve,
        param_labels=("a", "b", "c", "d"),
        defaults=lambda lo, hi: [lo, _at(lo, hi, 0.3), _at(lo, hi, 0.7), hi],
    ),
    aliases=["pi_curve", "pimf"],
)
_register(
    MembershipSpec(
        kind=MembershipKind.LEFT_SHOULDER,
        label="Left Shoulder(a,b)",
        function=membership.left_shoulder,
        param_labels=("a", "b"),
        defaults=_transition,
    ),
    aliases=["left_shoulder"],
)
_register(
    MembershipSpec(
        kind=MembershipKind.RIGHT_SHOULDER,
        label="Right Shoulder(a,b)",
        function=membership.right_shoulder,
        param_labels=("a", "b"),
        defaults=_transition,
    ),
    aliases=["right_shoulder"],
)
_register(
    MembershipSpec(
        kind=MembershipKind.SINGLETON,
        label="Singleton(c)",
        function=membership.singleton,
        param_labels=("c",),
        defaults=lambda lo, hi: [_mid(lo, hi)],
    ),
    aliases=["crisp"],
)


def get_spec(key: str) -> MembershipSpec:
    """
    Look up a catalogue entry by key or alias (case-insensitive).

    Args:
        key: Catalogue key, e.g. "triangular", "sCurve" or "bell"

    Returns:
        The matching MembershipSpec

    Raises:
        UnknownMembershipFunctionError: If the key is not registered
    """
    if isinstance(key, MembershipKind):
        key = key.value
    spec = MEMBERSHIP_REGISTRY.get(key)
    if spec is None:
        logger.error(f"Unknown membership function type: {key}")
        raise UnknownMembershipFunctionError(
            message=f"{key}: unknown membership function type",
            error_code=ErrorCodes.MF_UNKNOWN_TYPE,
            details={
                "function": key,
                "supported_types": MEMBERSHIP_REGISTRY.list_types(),
            },
        )
    return spec


def list_specs() -> list[MembershipSpec]:
    """All catalogue entries in presentation order."""
    return list(MEMBERSHIP_REGISTRY)


def get_supported_types() -> list[str]:
    """Canonical catalogue keys in presentation order."""
    return MEMBERSHIP_REGISTRY.list_types()


def resolve(key: str) -> Callable[..., float]:
    """Return the membership function registered under ``key``."""
    return get_spec(key).function


def default_parameters(key: str, vmin: float, vmax: float) -> list[float]:
    """Default parameters of ``key`` spread over the domain [vmin, vmax]."""
    return get_spec(key).default_parameters(vmin, vmax)


def evaluate(key: str, x: float, parameters: Sequence[float]) -> float:
    """
    Evaluate the membership function registered under ``key``.

    Args:
        key: Catalogue key or alias
        x: Input value
        parameters: Shape parameters in call order

    Returns:
        Degree of membership in [0, 1]

    Raises:
        UnknownMembershipFunctionError: If the key is not registered
        ParameterCountError: If the parameter count does not match
        MembershipError: If the function rejects the parameters
    """
    return get_spec(key).evaluate(x, parameters)
