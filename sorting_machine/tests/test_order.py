from ..order import by_key, case_insensitive, natural, reversed_order


def test_natural():
    assert natural(1, 2) < 0
    assert natural(2, 1) > 0
    assert natural(2, 2) == 0


def test_case_insensitive_is_a_preorder():
    assert case_insensitive("a", "A") == 0
    assert case_insensitive("b", "green") < 0
    assert case_insensitive("Hello", "blue") > 0


def test_by_key():
    order = by_key(len)
    assert order("aa", "b") > 0
    assert order("a", "b") == 0
    assert order == by_key(len)
    assert order != by_key(len, reversed_order())
    assert hash(order) == hash(by_key(len))


def test_reversed_order():
    order = reversed_order(natural)
    assert order(1, 2) > 0
    assert order == reversed_order(natural)
    assert order != reversed_order(case_insensitive)
