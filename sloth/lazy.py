"""
A container that computes its value on first use and caches it.

``Lazy(producer)`` stores ``producer``, a callable taking no arguments, and
calls it the first time the value is needed. Afterwards the container stands
in for the value: attribute access, operators, iteration and so on are
forwarded to it, and the producer is never called again.
"""

from copy import copy, deepcopy
from logging import getLogger

import attr
from attr import attrs, attrib

from .errors import ConsumedError, PoisonedError, ReentrantEvaluationError
from .proxy import Proxy, define_in_place_operators, is_internal_name
from .views import ReadOnlyView


logger = getLogger(__name__)


@attrs(frozen=True)
class Unevaluated(object):
    producer = attrib(validator=attr.validators.is_callable())


@attrs(frozen=True)
class Evaluating(object):
    producer = attrib()


@attrs(frozen=True)
class Evaluated(object):
    value = attrib()


@attrs(frozen=True)
class Poisoned(object):
    error = attrib()


@attrs(frozen=True)
class Consumed(object):
    pass


class Lazy(Proxy):
    """
    Lazily evaluated value.

    The producer runs at most once per successful evaluation. If it raises,
    the exception propagates to whoever triggered the evaluation and, by
    default, the container stays unevaluated so a later access calls the
    producer again. With ``poison_on_failure=True`` the first failure is
    final: later accesses raise ``PoisonedError``.

    >>> counter = []
    >>> value = Lazy(lambda: counter.append(1) or "hello")
    >>> value.value_ref(), value.upper(), len(counter)
    ('hello', 'HELLO', 1)
    """

    __slots__ = ("_sloth_state", "_sloth_poison_on_failure", "__weakref__")

    def __init__(self, producer, poison_on_failure=False):
        self._sloth_state = Unevaluated(producer)
        self._sloth_poison_on_failure = poison_on_failure

    def is_evaluated(self):
        return isinstance(self._sloth_state, Evaluated)

    def value_ref(self):
        """Returns the stored value, evaluating it first if necessary."""
        return self._force()

    def value_mut(self):
        """
        Returns the stored value for in-place mutation, evaluating it first
        if necessary. Changes made through the returned object are seen by
        every later access.
        """
        return self._force()

    def value_copy(self):
        return copy(self._force())

    def set_value(self, value):
        """
        Replaces the stored value. The producer is still evaluated first if
        it has not run yet, so it is called exactly once either way.
        """
        self._force()
        self._sloth_state = Evaluated(value)

    def as_ref(self):
        return self.value_ref()

    def as_mut(self):
        return self.value_mut()

    def as_readonly(self):
        return ReadOnlyView(self)

    def unwrap(self):
        """
        Returns the value and ends the life of the container. Any later
        access, including another call to ``unwrap()``, raises
        ``ConsumedError``.
        """
        value = self._force()
        self._sloth_state = Consumed()
        logger.debug("Consumed lazy value %r", value)
        return value

    def _proxy_target(self):
        return self._force()

    def _force(self):
        state = self._sloth_state
        if isinstance(state, Evaluated):
            return state.value
        elif isinstance(state, Unevaluated):
            return self._evaluate(state.producer)
        elif isinstance(state, Evaluating):
            raise ReentrantEvaluationError(
                "lazy value was accessed by its own producer {!r}".format(state.producer)
            )
        elif isinstance(state, Poisoned):
            raise PoisonedError("producer of lazy value failed earlier") from state.error
        else:
            raise ConsumedError("lazy value has already been consumed by unwrap()")

    def _evaluate(self, producer):
        logger.debug("Evaluating lazy value using %r", producer)
        self._sloth_state = Evaluating(producer)
        try:
            value = producer()
        except Exception as error:
            if self._sloth_poison_on_failure:
                logger.debug("Producer %r failed, poisoning lazy value", producer)
                self._sloth_state = Poisoned(error)
            else:
                logger.debug("Producer %r failed, lazy value left unevaluated", producer)
                self._sloth_state = Unevaluated(producer)
            raise
        except BaseException:
            self._sloth_state = Unevaluated(producer)
            raise

        self._sloth_state = Evaluated(value)
        return value

    def __setattr__(self, name, value):
        if is_internal_name(name):
            object.__setattr__(self, name, value)
        else:
            setattr(self.value_mut(), name, value)

    def __delattr__(self, name):
        if is_internal_name(name):
            object.__delattr__(self, name)
        else:
            delattr(self.value_mut(), name)

    def __setitem__(self, key, value):
        self.value_mut()[key] = value

    def __delitem__(self, key):
        del self.value_mut()[key]

    def __dir__(self):
        state = self._sloth_state
        if isinstance(state, Evaluated):
            return dir(state.value)
        else:
            return object.__dir__(self)

    def __copy__(self):
        """
        Copies the container without evaluating it. An unevaluated copy
        shares the producer but evaluates independently.
        """
        return self._copy_with_state(self._sloth_state)

    def __deepcopy__(self, memo):
        state = self._sloth_state
        if isinstance(state, Evaluated):
            state = Evaluated(deepcopy(state.value, memo))
        return self._copy_with_state(state)

    def _copy_with_state(self, state):
        if isinstance(state, Evaluating):
            state = Unevaluated(state.producer)

        copied = object.__new__(type(self))
        copied._sloth_state = state
        copied._sloth_poison_on_failure = self._sloth_poison_on_failure
        return copied

    def __repr__(self):
        state = self._sloth_state
        if isinstance(state, Evaluated):
            return "Lazy({!r})".format(state.value)
        else:
            return "<Lazy {}>".format(type(state).__name__.lower())


def _update_in_place(func):
    def method(self, other):
        self.set_value(func(self.value_mut(), other))
        return self

    return method


define_in_place_operators(Lazy, _update_in_place)
