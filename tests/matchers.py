from hamcrest import all_of, instance_of
from hamcrest.core.base_matcher import BaseMatcher

from sloth import Lazy


def is_unevaluated_lazy():
    return all_of(instance_of(Lazy), _EvaluationStateMatcher(False))


def is_evaluated_lazy():
    return all_of(instance_of(Lazy), _EvaluationStateMatcher(True))


class _EvaluationStateMatcher(BaseMatcher):
    def __init__(self, evaluated):
        self._evaluated = evaluated

    def _matches(self, item):
        return item.is_evaluated() == self._evaluated

    def describe_to(self, description):
        if self._evaluated:
            description.append_text("evaluated lazy value")
        else:
            description.append_text("unevaluated lazy value")


class CountingProducer(object):
    def __init__(self, value):
        self.calls = 0
        self._value = value

    def __call__(self):
        self.calls += 1
        return self._value
