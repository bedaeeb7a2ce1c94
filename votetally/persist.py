'''Conversion of tallying objects to and from JSON-ready dictionaries.

The entities of Votetally map directly to the JSON records of its file
formats, so serialization is a matter of listing the constructor parameters
of each class. The :func:`simple_serialization` decorator does exactly that.
'''

import inspect
from typing import Any, List, Dict, Optional


MAX_ID: int = 2 ** 32 - 1
'''Largest identifier accepted in JSON records (unsigned 32-bit range).'''


def simple_serialization(class_: type) -> type:
    '''A decorator to provide a simple to_dict() serialization method.

    The resulting method will serialize all object attributes corresponding
    to the class's constructor parameter names. Therefore, this decorator
    is only useful when the class stores all its original parameters
    unchanged (or in any other form acceptable to its constructor).

    :param class_: The class to add the method to.
    '''
    param_names = list(inspect.signature(class_.__init__).parameters.keys())
    if 'self' in param_names:
        param_names.remove('self')

    def to_dict(self) -> Dict[str, Any]:
        return {
            attr: serialize_value(getattr(self, attr))
            for attr in param_names
        }

    class_.to_dict = to_dict
    return class_


def serialize_value(value: Any) -> Any:
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    elif isinstance(value, tuple(ATOMIC_TYPES)):
        return value
    elif hasattr(value, '__iter__'):
        if hasattr(value, 'items') and hasattr(value, 'keys'):
            return {
                str(key): serialize_value(val)
                for key, val in value.items()
            }
        else:
            return [serialize_value(val) for val in value]
    else:
        raise ValueError(f'cannot serialize {value!r} to dict format')


def require_fields(value: Any,
                   fields: Dict[str, type],
                   what: str,
                   error: type = ValueError,
                   ) -> Dict[str, Any]:
    '''Check that a JSON-like dictionary has all fields of the given types.

    Booleans are never accepted where integers are required, and integers
    must lie between 0 and :data:`MAX_ID`, since identifiers are unsigned
    32-bit numbers.

    :param value: The dictionary to check.
    :param fields: Mapping of required field names to their types.
    :param what: Name of the record checked, for error messages.
    :param error: Exception class to raise on failure.
    :returns: The field values, keyed by field name.
    '''
    if not isinstance(value, dict):
        raise error(f'invalid {what}: JSON object expected, got {value!r}')
    checked = {}
    for name, type_ in fields.items():
        if name not in value:
            raise error(f'invalid {what}: missing field {name!r}')
        field_value = value[name]
        problem = _type_problem(field_value, type_)
        if problem is not None:
            raise error(f'invalid {what}: field {name!r} {problem},'
                        f' got {field_value!r}')
        checked[name] = field_value
    return checked


def _type_problem(value: Any, type_: type) -> Optional[str]:
    if type_ is int:
        if isinstance(value, bool) or not isinstance(value, int):
            return 'must be an integer'
        elif value < 0:
            return 'must not be negative'
        elif value > MAX_ID:
            return f'must not exceed {MAX_ID}'
    elif not isinstance(value, type_):
        return f'must be of type {type_.__name__}'
    return None


ATOMIC_TYPES: List[type] = [
    str, int, float, bool, type(None),
]
