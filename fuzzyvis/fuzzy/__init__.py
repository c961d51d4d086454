"""
Fuzzy logic module for FuzzyVis.

This module provides the membership function library, the catalogue that
resolves function keys, the fuzzy set / crisp variable configuration models
and the engine that fuzzifies and samples crisp variables.
"""

from fuzzyvis.fuzzy.membership import (
    complement,
    gaussian,
    generalized_bell,
    left_shoulder,
    pi_curve,
    right_shoulder,
    s_curve,
    sigmoid,
    singleton,
    trapezoidal,
    triangular,
    z_curve,
)
from fuzzyvis.fuzzy.catalogue import (
    MEMBERSHIP_REGISTRY,
    MembershipKind,
    MembershipSpec,
    default_parameters,
    evaluate,
    get_spec,
    list_specs,
)
from fuzzyvis.fuzzy.config import (
    CrispVariableConfig,
    FuzzyConfigLoader,
    FuzzySetConfig,
)
from fuzzyvis.fuzzy.engine import FuzzyEngine

__all__ = [
    # Membership functions
    "triangular",
    "trapezoidal",
    "gaussian",
    "generalized_bell",
    "sigmoid",
    "s_curve",
    "z_curve",
    "pi_curve",
    "left_shoulder",
    "right_shoulder",
    "singleton",
    "complement",
    # Catalogue
    "MEMBERSHIP_REGISTRY",
    "MembershipKind",
    "MembershipSpec",
    "get_spec",
    "list_specs",
    "default_parameters",
    "evaluate",
    # Configuration
    "FuzzySetConfig",
    "CrispVariableConfig",
    "FuzzyConfigLoader",
    # Engine
    "FuzzyEngine",
]
