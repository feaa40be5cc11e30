import functools

from .lazy import Lazy


def lazy(func):
    """
    Returns a function taking no arguments that returns the result of
    ``func()``, calling ``func`` only the first time.
    """
    return Lazy(func).value_ref


class lazy_property(object):
    """
    Per-instance lazy attribute.

    The decorated method runs the first time the attribute is read on an
    instance. Assigning to the attribute replaces the cached value without
    calling the method again.
    """

    def __init__(self, func):
        self._func = func
        functools.wraps(self._func)(self)

    def __get__(self, obj, cls):
        if obj is None:
            return self

        return self._lazy_for(obj).value_ref()

    def __set__(self, obj, value):
        self._lazy_for(obj).set_value(value)

    def _lazy_for(self, obj):
        key = "_lazy_" + self.__name__
        cell = obj.__dict__.get(key)
        if cell is None:
            cell = obj.__dict__[key] = Lazy(functools.partial(self._func, obj))

        return cell
