"""
A stream is either End or a Cons cell.
A Cons cell holds a value and a promise of the rest of the stream.

The above definition is the classic lazy list:
> A stream is the empty stream, or a pair whose cdr is a delayed stream.

Forcing the tail of a cell runs its producer once; the resulting stream is
remembered, so a cell shared by several streams is only ever computed once.
Streams may be infinite. Whoever drains one is responsible for bounding the
amount of work, e.g. with `take` or `element_at`.
"""

import logging

from errors import IndexOutOfRange, InvalidArgument, UnboundSlot, require_callable
from promise import Delayed

logger = logging.getLogger(__name__)


class Singleton:
    """Class with a single instance"""

    def __new__(cls):
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


class Stream:
    """Base of the two stream variants, End and Cons"""

    def __iter__(self):
        return to_sequence(self)


class End(Stream, Singleton):
    """The empty stream"""

    @staticmethod
    def is_empty():
        return True

    @property
    def head(self):
        raise IndexOutOfRange('End has no head')

    @property
    def tail(self):
        raise IndexOutOfRange('End has no tail')

    @staticmethod
    def __bool__():
        return False

    def __repr__(self):
        return 'End()'


class Cons(Stream):
    """A stream cell: an eager head and a lazily computed tail"""

    def __init__(self, head, producer):
        require_callable(producer, 'tail producer')
        self.head = head
        self._tail = Delayed(lambda: _checked(producer()))

    @staticmethod
    def is_empty():
        return False

    @property
    def tail(self):
        return self._tail.force()

    @property
    def is_tail_realized(self):
        return self._tail.is_realized

    @staticmethod
    def __bool__():
        return True

    def __repr__(self):
        # a forced tail may loop back to this cell, so never recurse into it
        if self.is_tail_realized:
            return 'Cons({!r}, <forced>)'.format(self.head)
        return 'Cons({!r}, ...)'.format(self.head)


def _checked(stream):
    if not isinstance(stream, Stream):
        raise TypeError('tail producer must return a Stream, got {!r}'.format(stream))
    return stream


class Slot:
    """Bind-once reference to a stream.

    Lets a stream refer to itself from inside its own tail producer:

        ones = Slot()
        ones.bind(cons(1, ones))

    The slot is callable, so it can be used directly as a tail producer.
    """

    def __init__(self):
        self._stream = None

    @property
    def is_bound(self):
        return self._stream is not None

    def bind(self, stream):
        if self.is_bound:
            raise UnboundSlot('slot is already bound')
        self._stream = _checked(stream)
        logger.debug('bound slot %#x to %r', id(self), stream)
        return stream

    def get(self):
        if not self.is_bound:
            raise UnboundSlot('slot was read before it was bound')
        return self._stream

    def __call__(self):
        return self.get()

    def delayed(self):
        """promise of the bound stream, for producers that need a Delayed"""
        return Delayed(self.get)


def cons(head, producer):
    return Cons(head, producer)


def single(value):
    return Cons(value, End)


def iterate(func, seed):
    require_callable(func, 'func')
    return Cons(seed, lambda: iterate(func, func(seed)))


def range_stream(start, count):
    if count <= 0:
        return End()
    return Cons(start, lambda: range_stream(start + 1, count - 1))


def repeat(value, count=None):
    if count is not None:
        if count <= 0:
            return End()
        return Cons(value, lambda: repeat(value, count - 1))

    loop = Slot()
    return loop.bind(Cons(value, loop))


def from_sequence(iterable):
    if iterable is None:
        raise InvalidArgument('from_sequence needs an iterable, got None')
    iterator = iter(iterable)

    def pull():
        try:
            item = next(iterator)
        except StopIteration:
            return End()
        return Cons(item, pull)

    return pull()


def to_sequence(stream):
    while not stream.is_empty():
        yield stream.head
        stream = stream.tail


def take(n, stream):
    while n > 0 and not stream.is_empty():
        yield stream.head
        n -= 1
        if n > 0:
            stream = stream.tail
