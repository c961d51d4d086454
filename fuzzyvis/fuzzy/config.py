"""
Configuration models for fuzzy sets and crisp variables.

A fuzzy set is data only: a catalogue key plus its parameter list. A crisp
variable is a named domain [min, max] with the fuzzy sets defined on it.
Both are validated with Pydantic and can be loaded from YAML files.
"""

from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, Field, FiniteFloat, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from fuzzyvis import get_logger
from fuzzyvis.config import get_path_settings
from fuzzyvis.errors import (
    ConfigurationError,
    ConfigurationFileError,
    ErrorCodes,
    InvalidConfigurationError,
)
from fuzzyvis.fuzzy.catalogue import MEMBERSHIP_REGISTRY, MembershipSpec, get_spec

# Set up module-level logger
logger = get_logger(__name__)


class FuzzySetConfig(BaseModel):
    """
    Configuration for one fuzzy set.

    The parameter count must match the arity of the referenced function.
    Ordering and positivity constraints are left to the function itself,
    which checks them on every call.
    """

    id: str = Field(..., min_length=1, description="Unique identifier within a variable")
    label: str = Field(..., description="Display label")
    color: Optional[str] = Field(default=None, description="Display color, e.g. '#1f77b4'")
    function: str = Field(..., description="Membership function catalogue key")
    parameters: list[FiniteFloat] = Field(
        ..., description="Shape parameters in the function's call order"
    )

    @field_validator("function")
    @classmethod
    def validate_function(cls, function: str) -> str:
        """
        Resolve the function key (or alias) to its canonical spelling.

        Raises:
            InvalidConfigurationError: If the key is not in the catalogue
        """
        canonical = MEMBERSHIP_REGISTRY.canonical_name(function)
        if canonical is None:
            raise InvalidConfigurationError(
                message=f"Unknown membership function type '{function}'",
                error_code=ErrorCodes.CONFIG_VALIDATION_FAILED,
                details={
                    "function": function,
                    "supported_types": MEMBERSHIP_REGISTRY.list_types(),
                },
            )
        return canonical

    @model_validator(mode="after")
    def validate_parameter_count(self) -> "FuzzySetConfig":
        """
        Check that the parameter list matches the function arity.

        Raises:
            InvalidConfigurationError: If the count does not match
        """
        spec = self.spec
        if len(self.parameters) != spec.arity:
            raise InvalidConfigurationError(
                message=(
                    f"Fuzzy set '{self.id}': {spec.key} requires exactly "
                    f"{spec.arity} parameters [{', '.join(spec.param_labels)}]"
                ),
                error_code=ErrorCodes.CONFIG_VALIDATION_FAILED,
                context={"section": "fuzzy_sets", "field": self.id},
                details={"expected": spec.arity, "actual": len(self.parameters)},
            )
        logger.debug(f"Validated fuzzy set '{self.id}': {self.function}{self.parameters}")
        return self

    @property
    def spec(self) -> MembershipSpec:
        return get_spec(self.function)

    def evaluate(self, x: float) -> float:
        """Membership degree of ``x`` in this set; errors propagate."""
        return self.spec.evaluate(x, self.parameters)

    @classmethod
    def from_preset(
        cls,
        function: str,
        vmin: float,
        vmax: float,
        id: Optional[str] = None,
        label: Optional[str] = None,
        color: Optional[str] = None,
    ) -> "FuzzySetConfig":
        """
        Build a fuzzy set with the catalogue's default parameters for a domain.

        Args:
            function: Catalogue key or alias
            vmin: Domain minimum
            vmax: Domain maximum
            id: Set identifier (defaults to the canonical key)
            label: Display label (defaults to the catalogue label)
            color: Optional display color

        Returns:
            A validated FuzzySetConfig
        """
        spec = get_spec(function)
        return cls(
            id=id or spec.key,
            label=label or spec.label,
            color=color,
            function=spec.key,
            parameters=spec.default_parameters(vmin, vmax),
        )


class CrispVariableConfig(BaseModel):
    """
    Configuration for a crisp input variable: a domain and its fuzzy sets.
    """

    id: str = Field(..., min_length=1)
    name: str
    min: FiniteFloat
    max: FiniteFloat
    fuzzy_sets: list[FuzzySetConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_variable(self) -> "CrispVariableConfig":
        """
        Validate the domain bounds and fuzzy set identifiers.

        Raises:
            InvalidConfigurationError: If min > max, set ids repeat or a
                set uses the reserved id "x"
        """
        if self.min > self.max:
            raise InvalidConfigurationError(
                message=f"Variable '{self.name}': domain requires min <= max",
                error_code=ErrorCodes.CONFIG_INVALID_DOMAIN,
                context={"field": "min/max"},
                details={"min": self.min, "max": self.max},
            )

        # "x" names the sample point column in sampled tables
        seen: set[str] = {"x"}
        for fuzzy_set in self.fuzzy_sets:
            if fuzzy_set.id in seen:
                raise InvalidConfigurationError(
                    message=f"Variable '{self.name}': duplicate or reserved fuzzy set id '{fuzzy_set.id}'",
                    error_code=ErrorCodes.CONFIG_DUPLICATE_SET_ID,
                    context={"section": "fuzzy_sets", "field": fuzzy_set.id},
                )
            seen.add(fuzzy_set.id)

        logger.debug(
            f"Validated variable '{self.name}' [{self.min}, {self.max}] "
            f"with sets: {[s.id for s in self.fuzzy_sets]}"
        )
        return self

    def get_set(self, set_id: str) -> Optional[FuzzySetConfig]:
        """Return the fuzzy set with ``set_id``, or None."""
        for fuzzy_set in self.fuzzy_sets:
            if fuzzy_set.id == set_id:
                return fuzzy_set
        return None


class FuzzyConfigLoader:
    """
    Loads and validates crisp variable definitions from YAML files.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the loader.

        Args:
            config_dir: Directory relative paths are resolved against.
                        Defaults to FUZZYVIS_CONFIG_DIR (``config``).
        """
        self.config_dir = (
            Path(config_dir) if config_dir else get_path_settings().config_dir
        )
        logger.debug(f"Initialized FuzzyConfigLoader with config directory: {self.config_dir}")

    @staticmethod
    def load_from_dict(config_dict: dict[str, Any]) -> CrispVariableConfig:
        """
        Load and validate a crisp variable from a dictionary.

        Args:
            config_dict: Dictionary representation of the variable

        Returns:
            Validated CrispVariableConfig

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        try:
            return CrispVariableConfig.model_validate(config_dict)
        except ConfigurationError:
            raise
        except PydanticValidationError as e:
            logger.error(f"Failed to validate fuzzy configuration: {e}")
            raise InvalidConfigurationError(
                message="Fuzzy configuration validation failed",
                error_code=ErrorCodes.CONFIG_VALIDATION_FAILED,
                details={
                    "validation_errors": [
                        {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
                    ]
                },
            ) from e

    def load_from_yaml(self, file_path: Union[str, Path]) -> CrispVariableConfig:
        """
        Load and validate a crisp variable from a YAML file.

        Args:
            file_path: Path to the YAML file; relative paths are resolved
                       against the config directory unless they exist as given

        Returns:
            Validated CrispVariableConfig

        Raises:
            ConfigurationFileError: If the file cannot be found or read
            InvalidConfigurationError: If the YAML or its content is invalid
        """
        path = Path(file_path)
        if not path.is_absolute() and not path.exists():
            path = self.config_dir / path

        logger.info(f"Loading fuzzy configuration from file: {path}")

        if not path.exists():
            logger.error(f"Fuzzy configuration file not found: {path}")
            raise ConfigurationFileError(
                message=f"Fuzzy configuration file not found: {path}",
                error_code=ErrorCodes.CONFIG_FILE_NOT_FOUND,
                context={"file": str(path)},
                suggestion="Check the path or set FUZZYVIS_CONFIG_DIR",
            )

        try:
            with open(path, encoding="utf-8") as file:
                config_dict = yaml.safe_load(file)
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML format in fuzzy configuration file: {e}")
            raise InvalidConfigurationError(
                message="Invalid YAML format in fuzzy configuration file",
                error_code=ErrorCodes.CONFIG_INVALID_YAML,
                context={"file": str(path)},
                details={"yaml_error": str(e)},
            ) from e
        except OSError as e:
            logger.error(f"Error reading fuzzy configuration file: {e}")
            raise ConfigurationFileError(
                message=f"Error reading fuzzy configuration file: {path}",
                error_code=ErrorCodes.CONFIG_LOAD_FAILED,
                context={"file": str(path)},
                details={"error": str(e)},
            ) from e

        if not isinstance(config_dict, dict):
            raise InvalidConfigurationError(
                message="Fuzzy configuration file must contain a mapping",
                error_code=ErrorCodes.CONFIG_VALIDATION_FAILED,
                context={"file": str(path)},
            )

        try:
            variable = self.load_from_dict(config_dict)
        except ConfigurationError as e:
            e.context.setdefault("file", str(path))
            raise

        logger.info(f"Successfully loaded fuzzy configuration from {path}")
        return variable

    def load_default(self) -> CrispVariableConfig:
        """
        Load the default variable from 'fuzzy.yaml' in the config directory.
        """
        default_path = self.config_dir / "fuzzy.yaml"
        logger.info(f"Loading default fuzzy configuration from: {default_path}")
        return self.load_from_yaml(default_path)
