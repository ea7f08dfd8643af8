"""
Combinators build new streams out of existing ones.

Each combinator forces no more of its inputs than it needs to produce the
head of its result; everything else is deferred to the result's tail
producers. The exceptions are `where`, `skip_while`, `skip` and `flatten`,
which walk over discarded elements at call time.

`where` and `skip_while` do not terminate when applied to an infinite
stream in which no further element has the required property. For `where`
this happens in the call itself when no element matches at all, before
anything is forced from the result. Likewise `select_many` and `flatten`
do not terminate on an infinite stream of empty substreams. Bound the
consumption of such streams.
"""

import operator

from errors import IndexOutOfRange, InvalidArgument, require_callable
from stream import Cons, End, Stream, from_sequence, take


def where(stream, predicate):
    """stream of the elements for which predicate holds"""
    require_callable(predicate, 'predicate')
    while not stream.is_empty() and not predicate(stream.head):
        stream = stream.tail
    if stream.is_empty():
        return End()
    return Cons(stream.head, lambda: where(stream.tail, predicate))


def select(stream, *args):
    """select(stream, func) maps func over stream.
    select(stream1, stream2, func) maps func over pairs, like zip_with.
    """
    if len(args) == 2:
        return zip_with(stream, *args)
    if len(args) != 1:
        raise InvalidArgument('select takes func or stream2, func')
    func, = args
    require_callable(func, 'func')
    return _select(stream, func)


def _select(stream, func):
    if stream.is_empty():
        return End()
    return Cons(func(stream.head), lambda: _select(stream.tail, func))


def zip_with(stream1, stream2, func):
    """combine corresponding elements, stopping at the shorter stream"""
    require_callable(func, 'func')
    return _zip_with(stream1, stream2, func)


def _zip_with(stream1, stream2, func):
    if stream1.is_empty() or stream2.is_empty():
        return End()
    return Cons(func(stream1.head, stream2.head),
                lambda: _zip_with(stream1.tail, stream2.tail, func))


def select_many(stream, func, result=None):
    """bind: concatenate the streams func(x) for every x of stream

    With result given, each pair (x, y) with y from func(x) is mapped
    through result(x, y).
    """
    require_callable(func, 'func')
    if result is None:
        return flatten(_select(stream, func))
    require_callable(result, 'result')
    return flatten(_select(stream, lambda x: select(_as_stream(func(x)),
                                                    lambda y: result(x, y))))


def concat(stream1, stream2):
    """all of stream1, then all of stream2"""
    return _append(stream1, lambda: stream2)


def _append(stream, rest):
    if stream.is_empty():
        return rest()
    return Cons(stream.head, lambda: _append(stream.tail, rest))


def interleave(stream1, stream2):
    """alternate between both streams until one of them ends"""
    if stream1.is_empty():
        return stream2
    return Cons(stream1.head, lambda: interleave(stream2, stream1.tail))


def flatten(streams):
    """concatenate a stream of streams"""
    return _flatten(End(), lambda: streams)


def _flatten(inner, rest):
    while inner.is_empty():
        outer = rest()
        if outer.is_empty():
            return End()
        inner = _as_stream(outer.head)
        rest = _tail_of(outer)
    return Cons(inner.head, lambda: _flatten(inner.tail, rest))


def _tail_of(stream):
    return lambda: stream.tail


def _as_stream(x):
    if isinstance(x, Stream):
        return x
    return from_sequence(x)


def skip(stream, n):
    """drop the first n elements"""
    while n > 0 and not stream.is_empty():
        stream = stream.tail
        n -= 1
    return stream


def skip_while(stream, predicate):
    """drop leading elements as long as predicate holds"""
    require_callable(predicate, 'predicate')
    while not stream.is_empty() and predicate(stream.head):
        stream = stream.tail
    return stream


def element_at(stream, index):
    try:
        index = operator.index(index)
    except TypeError:
        raise InvalidArgument('stream index must be an integer, got {!r}'.format(index)) from None
    if index < 0:
        raise IndexOutOfRange('negative stream index {}'.format(index))
    for _ in range(index):
        if stream.is_empty():
            break
        stream = stream.tail
    if stream.is_empty():
        raise IndexOutOfRange('stream index {} out of range'.format(index))
    return stream.head


Stream.where = where
Stream.select = select
Stream.select_many = select_many
Stream.concat = concat
Stream.zip = zip_with
Stream.interleave = interleave
Stream.flatten = flatten
Stream.skip = skip
Stream.skip_while = skip_while
Stream.element_at = element_at
Stream.take = lambda self, n: take(n, self)
Stream.__getitem__ = element_at
