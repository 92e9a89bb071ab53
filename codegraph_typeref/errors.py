"""
Standardized Error Handling for the type-reference translator

Missing type information is never an error: the translator degrades to the
opaque ``object`` reference. Errors here mean a contract violation or a type
graph the translator cannot walk.
"""

from typing import Any


class TypeRefError(Exception):
    """Base exception for all translator errors.

    ``code`` is stable for programmatic handling; ``context`` carries the
    type-model details needed to find the offending node.

    Example:
        raise TypeRefError(
            code="UNSUPPORTED_TYPE_KIND",
            message="Data type <FrozenSetType> has no translation rule",
            type_name="FrozenSetType",
            depth=3,
        )
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    @property
    def type_name(self) -> str | None:
        """Class name of the type-model value involved, when known"""
        return self.context.get("type_name")

    def __repr__(self) -> str:
        fields = {"code": self.code, "message": self.message, **self.context}
        return f"{self.__class__.__name__}({', '.join(f'{k}={v!r}' for k, v in fields.items())})"


class UnsupportedTypeKindError(TypeRefError):
    """The dispatcher received a value outside the closed type-model variant set.

    Fatal: the type model and the translator are out of sync. Abort the
    enclosing unit rather than recovering.
    """

    def __init__(self, data_type: Any, **context: Any) -> None:
        type_name = type(data_type).__name__
        super().__init__(
            code="UNSUPPORTED_TYPE_KIND",
            message=f"Data type {data_type!r} ({type_name}) has no translation rule",
            type_name=type_name,
            **context,
        )
        self.data_type = data_type


class TranslationDepthError(TypeRefError):
    """An acyclic type graph nests deeper than the interpreter stack allows.

    Cycles never cause this (the recursion guard cuts them); only genuinely
    deep nesting does, roughly a few hundred levels with the default
    recursion limit.
    """

    def __init__(self, data_type: Any, **context: Any) -> None:
        type_name = type(data_type).__name__
        super().__init__(
            code="TRANSLATION_TOO_DEEP",
            message=f"Type graph rooted at {data_type!r} nests too deeply to translate",
            type_name=type_name,
            **context,
        )
        self.data_type = data_type


class ConfigurationError(TypeRefError):
    """Invalid translator settings (environment or settings object).

    TargetProfile built directly raises pydantic's ValidationError;
    get_settings() wraps that into this error.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="CONFIGURATION_ERROR", message=message, **context)
