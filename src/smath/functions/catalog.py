from typing import Dict, List, Type

from ..utils.logging_config import get_logger
from .base import MathFunction
from .trigonometric import Cosine, Sine

logger = get_logger(__name__)


class UnknownFunctionError(KeyError):
    """Raised when a function name is not in the catalog."""
    pass


FUNCTIONS: Dict[str, Type[MathFunction]] = {
    function.NAME: function for function in (Sine, Cosine)
}

_LOOKUP: Dict[str, Type[MathFunction]] = {}
for _function in FUNCTIONS.values():
    for _name in (_function.NAME,) + _function.ALIASES + (_function.PLAIN_TEXT_FORMULA,):
        _LOOKUP[_name.lower()] = _function


def available_functions() -> List[str]:
    """Names of all catalogued functions."""
    return sorted(FUNCTIONS)


def get_function(name: str) -> Type[MathFunction]:
    """
    Get the descriptor for a function name, alias or formula (e.g. 'sin').

    Raises:
        UnknownFunctionError: If nothing in the catalog matches.
    """
    function = _LOOKUP.get(name.strip().lower())
    if function is None:
        raise UnknownFunctionError(f"Function '{name}' not found. Available functions: {available_functions()}")
    logger.debug(f"Resolved function '{name}' to {function.NAME}")
    return function
