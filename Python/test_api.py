import operator

import api
from api import recursive, cons, zip_with, select, take, Stream


def test_recursive_ones():
    ones = recursive(lambda ones: cons(1, ones))
    assert ones.tail is ones
    assert list(take(3, ones)) == [1, 1, 1]


def test_recursive_integers():
    integers = recursive(lambda ints: cons(1, lambda: select(ints(), lambda n: n + 1)))
    assert list(take(5, integers)) == [1, 2, 3, 4, 5]


def test_recursive_fibonacci():
    fibs = recursive(lambda fibs: cons(0, lambda: cons(1, lambda: zip_with(fibs(), fibs().tail,
                                                                           operator.add))))
    assert fibs.element_at(30) == 832040


def test_api_exports_everything():
    for name in api.__all__:
        assert hasattr(api, name)


def test_api_installs_stream_methods():
    for name in ('where', 'select', 'select_many', 'concat', 'zip', 'interleave', 'flatten',
                 'skip', 'skip_while', 'element_at', 'take'):
        assert callable(getattr(Stream, name))
