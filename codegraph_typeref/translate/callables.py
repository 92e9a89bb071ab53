"""
Callable Mapper

Function types become Func<P, R> or Action<P>.

The target type system cannot express a set of call signatures as one type,
so overloaded callables are collapsed to their first-declared arrow.
"""

from ..config import TargetProfile
from ..observability import get_logger
from ..types import Translation
from ..types.datatypes import ClassType, DataType, FunType, InstanceType
from ..types.namespaces import add_namespace, join_namespaces
from ..types.reference import TypeReference
from .containers import Recurse
from .guard import RecursionGuard

logger = get_logger(__name__)


def is_none_instance(data_type: DataType, profile: TargetProfile) -> bool:
    """True for an instance of the nominal "no value" class."""
    return (
        isinstance(data_type, InstanceType)
        and isinstance(data_type.class_type, ClassType)
        and data_type.class_type.name == profile.none_class_name
    )


def select_arrow(fun_type: FunType) -> tuple[DataType, DataType]:
    """First-declared (parameter, return) pair. Caller ensures arrows is non-empty."""
    if len(fun_type.arrows) > 1:
        logger.debug("overloads_collapsed", signatures=len(fun_type.arrows))
    return next(iter(fun_type.arrows.items()))


def translate_fun(fun_type: FunType, guard: RecursionGuard, recurse: Recurse, profile: TargetProfile) -> Translation:
    if not fun_type.arrows:
        # Signature unknown
        opaque = profile.object_reference()
        return (
            TypeReference(profile.function_name, (opaque, opaque)),
            add_namespace(None, profile.callable_namespace),
        )

    param_type, return_type = select_arrow(fun_type)

    with guard.entered(fun_type):
        param_ref, param_ns = recurse(param_type, guard)
        if is_none_instance(return_type, profile):
            return (
                TypeReference(profile.procedure_name, (param_ref,)),
                add_namespace(param_ns, profile.callable_namespace),
            )
        return_ref, return_ns = recurse(return_type, guard)

    namespaces = add_namespace(join_namespaces(param_ns, return_ns), profile.callable_namespace)
    return TypeReference(profile.function_name, (param_ref, return_ref)), namespaces
