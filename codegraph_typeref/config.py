"""
Centralized configuration for the type-reference translator

Target names and namespaces live in a TargetProfile so translation rules never
hard-code them. Defaults describe the C# target.

Usage:
    from codegraph_typeref.config import TargetProfile, get_settings

    # Default profile
    profile = get_settings().profile

    # Override for a specific target
    custom = TargetProfile(set_name="HashSet")

Environment variables (prefixed with TYPEREF_):
    TYPEREF_LOG_LEVEL=DEBUG
    TYPEREF_PROFILE__SET_NAME=HashSet
    TYPEREF_PROFILE__TUPLE_NAMESPACE=System.Runtime
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .types.reference import TypeReference

SYSTEM_NAMESPACE = "System"
GENERIC_COLLECTION_NAMESPACE = "System.Collections.Generic"

_NAME_FIELDS = (
    "object_name",
    "string_name",
    "int_name",
    "float_name",
    "bool_name",
    "dict_name",
    "list_name",
    "set_name",
    "tuple_name",
    "function_name",
    "procedure_name",
    "none_class_name",
)
_NAMESPACE_FIELDS = (
    "dict_namespace",
    "list_namespace",
    "set_namespace",
    "tuple_namespace",
    "callable_namespace",
)


class TargetProfile(BaseModel):
    """Names and namespaces of the target language's types."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Scalars (never need an import)
    object_name: str = Field(default="object")
    """Opaque fallback reference"""

    string_name: str = Field(default="string")
    int_name: str = Field(default="int")
    float_name: str = Field(default="float")
    bool_name: str = Field(default="bool")

    # Containers
    dict_name: str = Field(default="Dictionary")
    dict_namespace: str | None = Field(default=GENERIC_COLLECTION_NAMESPACE)

    list_name: str = Field(default="List")
    list_namespace: str | None = Field(default=GENERIC_COLLECTION_NAMESPACE)

    set_name: str = Field(default="Set")
    set_namespace: str | None = Field(default=GENERIC_COLLECTION_NAMESPACE)

    tuple_name: str = Field(default="Tuple")
    tuple_namespace: str | None = Field(default=SYSTEM_NAMESPACE)

    # Callables
    function_name: str = Field(default="Func")
    """Callable with a return value: Func<P, R>"""

    procedure_name: str = Field(default="Action")
    """Callable without a return value: Action<P>"""

    callable_namespace: str | None = Field(default=SYSTEM_NAMESPACE)

    none_class_name: str = Field(default="None")
    """Class whose instance marks "returns nothing" in the type model"""

    @field_validator(*_NAME_FIELDS)
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Type names must be non-blank identifiers-ish"""
        v = v.strip()
        if not v:
            raise ValueError("type name must not be blank")
        return v

    @field_validator(*_NAMESPACE_FIELDS)
    @classmethod
    def validate_namespace(cls, v: str | None) -> str | None:
        """Blank namespace means "no import needed"."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    def object_reference(self) -> TypeReference:
        return TypeReference(self.object_name)


class TypeRefSettings(BaseSettings):
    """
    Root configuration.

    Can be configured via:
    - Environment variables (prefixed with TYPEREF_)
    - Direct instantiation
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPEREF_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    json_logs: bool = Field(default=False)
    profile: TargetProfile = Field(default_factory=TargetProfile)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> TypeRefSettings:
    """
    Get the global settings instance.

    Cached; call get_settings.cache_clear() to reload from the environment.

    Raises:
        ConfigurationError: environment holds invalid values
    """
    try:
        return TypeRefSettings()
    except ValidationError as e:
        raise ConfigurationError("Invalid translator settings", errors=e.errors()) from e
