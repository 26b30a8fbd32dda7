import pytest

from ..errors import EmptyContainerError, IllegalStateError
from ..order import case_insensitive, natural
from ..staged import Extractor, Inserter


def test_inserter_to_extractor():
    inserter = Inserter(case_insensitive)
    inserter.add("hello").add("blue").add("green")
    assert inserter.size() == 3
    extractor = inserter.finish()
    assert isinstance(extractor, Extractor)
    assert extractor.order() is case_insensitive
    assert extractor.peek() == "blue"
    assert [extractor.remove_first() for _ in range(3)] == ["blue", "green", "hello"]
    assert len(extractor) == 0


def test_finished_inserter_is_spent():
    inserter = Inserter(natural)
    inserter.add(1)
    inserter.finish()
    with pytest.raises(IllegalStateError):
        inserter.add(2)
    with pytest.raises(IllegalStateError):
        inserter.finish()
    with pytest.raises(IllegalStateError):
        len(inserter)
    assert inserter.order() is natural


def test_extractor_has_no_add():
    extractor = Inserter(natural).finish()
    assert not hasattr(extractor, "add")


def test_extractor_empty():
    extractor = Inserter(natural).finish()
    with pytest.raises(EmptyContainerError):
        extractor.remove_first()
    with pytest.raises(EmptyContainerError):
        extractor.peek()


def test_extractor_iterates_in_order():
    extractor = Inserter(natural).extend([5, 1, 4, 1, 3]).finish()
    assert list(extractor) == [1, 1, 3, 4, 5]
    assert extractor.size() == 0


def test_extend_accepts_any_iterable():
    extractor = Inserter(natural).extend(x for x in (3, 1, 2)).extend(range(2)).finish()
    assert list(extractor) == [0, 1, 1, 2, 3]
