from .proxy import Proxy, define_in_place_operators


class ReadOnlyView(Proxy):
    """
    Read-only stand-in for the value of a lazy container.

    Reads are forwarded through the container, so the view evaluates it on
    first use and sees later changes made through it. Attribute and item
    assignment, deletion and in-place operators raise ``TypeError``.
    Methods of the value are still reachable, so a view cannot stop the
    value from mutating itself.
    """

    __slots__ = ("_sloth_lazy", "__weakref__")

    def __init__(self, lazy):
        object.__setattr__(self, "_sloth_lazy", lazy)

    def _proxy_target(self):
        return self._sloth_lazy.value_ref()

    def __setattr__(self, name, value):
        raise _read_only_error("assign attribute {!r}".format(name))

    def __delattr__(self, name):
        raise _read_only_error("delete attribute {!r}".format(name))

    def __setitem__(self, key, value):
        raise _read_only_error("assign item {!r}".format(key))

    def __delitem__(self, key):
        raise _read_only_error("delete item {!r}".format(key))

    def __dir__(self):
        return dir(self._sloth_lazy)

    def __repr__(self):
        return "ReadOnlyView({!r})".format(self._sloth_lazy)


def _read_only_error(action):
    return TypeError("cannot {} through a read-only view".format(action))


def _reject_in_place(func):
    def method(self, other):
        raise _read_only_error("apply {}".format(func.__name__))

    return method


define_in_place_operators(ReadOnlyView, _reject_in_place)
