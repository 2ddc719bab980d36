import numpy as np
import numbers
from collections.abc import Mapping


def sanitize_type(obj, dtype, name):
    if isinstance(dtype, (tuple, list)):
        check = max((is_dtype(obj, dt) for dt in dtype))
        if not check:
            raise TypeError(f"'{name}' expected type one of {dtype}. Got: '{type(obj)}'")
    else:
        if not is_dtype(obj, dtype):
            raise TypeError(f"{name} expected type: '{dtype}'. Got: '{type(obj)}'")
    return True


def sanitize_length(obj, length, name):
    if len(obj) != length:
        raise ValueError(f"'{name}' expected length {length}. Got length: {len(obj)}")
    return True


def is_dtype(obj, dtype):
    if isinstance(dtype, type):
        return isinstance(obj, dtype)
    if dtype not in func_dict.keys():
        raise NotImplementedError(f"string dtype: {dtype} not Implemented. Supported: {func_dict.keys()}")
    return func_dict[dtype](obj)


def to_number(obj):
    """
    float value of a number or of a numeric string (e.g. '20', ' 1.5e2'), else None
    """
    if is_numeric(obj):
        return float(obj)
    if isinstance(obj, str):
        try:
            return float(obj.strip())
        except ValueError:
            return None
    return None


def is_none(obj):
    """
    check whether object is None
    """
    return obj is None


def is_numeric(obj):
    """
    check whether object is numeric
    """
    return isinstance(obj, numbers.Real) and not is_boolean(obj)


def is_boolean(obj):
    """
    check whether object is boolean
    """
    return isinstance(obj, (bool, np.bool_))


def is_finite(obj):
    """
    check whether numeric object is finite
    """
    if not (is_numeric(obj) or is_boolean(obj)):
        return False
    return bool(not np.isinf(obj) and not np.isnan(obj))  # return as python bool


def is_mapping(obj):
    return isinstance(obj, Mapping)


def is_array_like(obj):
    """
    check whether object is array-like.
    """
    if isinstance(obj, (str, dict)):
        return False
    if not hasattr(obj, "__len__"):
        return False
    if not hasattr(obj, "__iter__"):
        return False
    if not hasattr(obj, "__getitem__"):
        return False
    return True


func_dict = {
    "numeric": is_numeric,
    "boolean": is_boolean,
    "arraylike": is_array_like,
    "mapping": is_mapping,
    "finite": is_finite,
    "none": is_none,
}
