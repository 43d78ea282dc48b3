"""Import classes from ``package.module:ClassName`` references."""

import importlib
from typing import Any

from ..domain.errors import InvalidArgumentError, MemberNotFoundError


def load_class(module_name: str, qualname: str) -> type:
    """Import a module and look up a (possibly nested) class in it.

    Args:
        module_name: Dotted module path, e.g. ``collections``
        qualname: Class path inside the module, e.g. ``Outer.Inner``

    Returns:
        The class object

    Raises:
        ModuleNotFoundError: If the module cannot be imported
        MemberNotFoundError: If a name along ``qualname`` does not exist
        InvalidArgumentError: If the resolved object is not a class
    """
    obj: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise MemberNotFoundError(f"{module_name}:{qualname} not found ({part!r} is missing)") from e

    if not isinstance(obj, type):
        raise InvalidArgumentError(f"{module_name}:{qualname} is not a class")
    return obj
