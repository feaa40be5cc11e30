from hamcrest import assert_that, contains_exactly, equal_to, instance_of
import pytest

from sloth import Lazy, ReadOnlyView
from .matchers import CountingProducer


def test_creating_view_does_not_evaluate_value():
    producer = CountingProducer([1, 2])
    value = Lazy(producer)

    view = value.as_readonly()

    assert_that(view, instance_of(ReadOnlyView))
    assert_that(producer.calls, equal_to(0))
    assert_that(repr(view), equal_to("ReadOnlyView(<Lazy unevaluated>)"))


def test_view_reads_value_through_container():
    producer = CountingProducer([1, 2])
    value = Lazy(producer)
    view = value.as_readonly()

    assert_that(view[0], equal_to(1))
    assert_that(len(view), equal_to(2))
    assert_that(list(view), contains_exactly(1, 2))
    assert_that(view.index(2), equal_to(1))
    assert view == [1, 2]
    assert_that(producer.calls, equal_to(1))


def test_view_sees_changes_made_through_container():
    value = Lazy(lambda: "some str")
    view = value.as_readonly()

    value.set_value("new str")

    assert_that(str(view), equal_to("new str"))


def test_view_rejects_item_assignment_and_deletion():
    value = Lazy(lambda: {"id": 1})
    view = value.as_readonly()

    with pytest.raises(TypeError):
        view["id"] = 2
    with pytest.raises(TypeError):
        del view["id"]

    assert_that(value.value_ref(), equal_to({"id": 1}))


def test_view_rejects_attribute_assignment_and_deletion():
    view = Lazy(lambda: object()).as_readonly()

    with pytest.raises(TypeError):
        view.name = "PG Wodehouse"
    with pytest.raises(TypeError):
        del view.name


def test_view_rejects_in_place_operators():
    value = Lazy(lambda: [1])
    view = value.as_readonly()

    with pytest.raises(TypeError):
        view += [2]

    assert_that(value.value_ref(), contains_exactly(1))


def test_non_mutating_operators_return_new_values():
    view = Lazy(lambda: 10).as_readonly()

    assert_that(view + 5, equal_to(15))
    assert_that(view, equal_to(10))
