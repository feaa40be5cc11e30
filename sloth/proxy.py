import math
import operator


_INTERNAL_PREFIX = "_sloth_"


def is_internal_name(name):
    return name.startswith(_INTERNAL_PREFIX)


class Proxy(object):
    """
    Forwards attribute reads and the special methods Python looks up on the
    type to the object returned by ``_proxy_target()``.

    Subclasses keep their own state in slots named ``_sloth_*``, which are
    never forwarded.
    """

    __slots__ = ()

    def _proxy_target(self):
        raise NotImplementedError()

    def __getattr__(self, name):
        if is_internal_name(name):
            raise AttributeError(name)

        return getattr(self._proxy_target(), name)

    def __dir__(self):
        return dir(self._proxy_target())

    def __hash__(self):
        return hash(self._proxy_target())

    def __call__(self, *args, **kwargs):
        return self._proxy_target()(*args, **kwargs)

    def __format__(self, format_spec):
        return format(self._proxy_target(), format_spec)

    def __round__(self, ndigits=None):
        if ndigits is None:
            return round(self._proxy_target())
        else:
            return round(self._proxy_target(), ndigits)

    def __pow__(self, other, modulo=None):
        if modulo is None:
            return pow(self._proxy_target(), other)
        else:
            return pow(self._proxy_target(), other, modulo)

    def __enter__(self):
        return self._proxy_target().__enter__()

    def __exit__(self, exc_type, exc_value, traceback):
        return self._proxy_target().__exit__(exc_type, exc_value, traceback)


unary_operators = [
    ("str", str),
    ("bytes", bytes),
    ("bool", bool),
    ("len", len),
    ("iter", iter),
    ("reversed", reversed),
    ("int", int),
    ("float", float),
    ("complex", complex),
    ("index", operator.index),
    ("trunc", math.trunc),
    ("floor", math.floor),
    ("ceil", math.ceil),
    ("abs", abs),
    ("neg", operator.neg),
    ("pos", operator.pos),
    ("invert", operator.invert),
]

comparison_operators = [
    ("eq", operator.eq),
    ("ne", operator.ne),
    ("lt", operator.lt),
    ("le", operator.le),
    ("gt", operator.gt),
    ("ge", operator.ge),
]

binary_operators = [
    ("add", operator.add),
    ("sub", operator.sub),
    ("mul", operator.mul),
    ("matmul", operator.matmul),
    ("truediv", operator.truediv),
    ("floordiv", operator.floordiv),
    ("mod", operator.mod),
    ("divmod", divmod),
    ("lshift", operator.lshift),
    ("rshift", operator.rshift),
    ("and", operator.and_),
    ("xor", operator.xor),
    ("or", operator.or_),
]

in_place_operators = [
    ("iadd", operator.iadd),
    ("isub", operator.isub),
    ("imul", operator.imul),
    ("imatmul", operator.imatmul),
    ("itruediv", operator.itruediv),
    ("ifloordiv", operator.ifloordiv),
    ("imod", operator.imod),
    ("ipow", operator.ipow),
    ("ilshift", operator.ilshift),
    ("irshift", operator.irshift),
    ("iand", operator.iand),
    ("ixor", operator.ixor),
    ("ior", operator.ior),
]


def special_name(name):
    return "__{}__".format(name)


def _forward_unary(func):
    def method(self):
        return func(self._proxy_target())

    return method


def _forward_binary(func):
    def method(self, other):
        return func(self._proxy_target(), other)

    return method


def _forward_reflected(func):
    def method(self, other):
        return func(other, self._proxy_target())

    return method


def _define(cls, name, method):
    method.__name__ = name
    method.__qualname__ = "{}.{}".format(cls.__name__, name)
    setattr(cls, name, method)


def _define_forwarding_methods(cls):
    for name, func in unary_operators:
        _define(cls, special_name(name), _forward_unary(func))

    for name, func in comparison_operators:
        _define(cls, special_name(name), _forward_binary(func))

    _define(cls, "__getitem__", _forward_binary(operator.getitem))
    _define(cls, "__contains__", _forward_binary(operator.contains))

    for name, func in binary_operators:
        _define(cls, special_name(name), _forward_binary(func))
        _define(cls, special_name("r" + name), _forward_reflected(func))

    _define(cls, "__rpow__", _forward_reflected(pow))


def define_in_place_operators(cls, make_method):
    """
    Defines every in-place operator on ``cls``, each built by calling
    ``make_method(func)`` with the matching ``operator`` function.
    """
    for name, func in in_place_operators:
        _define(cls, special_name(name), make_method(func))


_define_forwarding_methods(Proxy)
