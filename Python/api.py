from errors import IndexOutOfRange, InvalidArgument, ReentrantForce, UnboundSlot
from promise import Delayed, delay
from stream import (Stream, End, Cons, Slot, cons, single, iterate, range_stream, repeat,
                    from_sequence, to_sequence, take)
from combinators import (where, select, select_many, concat, zip_with, interleave, flatten,
                         skip, skip_while, element_at)


def recursive(build):
    """build a self-referential stream

    `build` receives a producer of the stream being defined and returns it:

        ones = recursive(lambda ones: cons(1, ones))
    """
    slot = Slot()
    return slot.bind(build(slot))


__all__ = [
    'IndexOutOfRange', 'InvalidArgument', 'ReentrantForce', 'UnboundSlot',
    'Delayed', 'delay',
    'Stream', 'End', 'Cons', 'Slot', 'cons', 'single', 'iterate', 'range_stream', 'repeat',
    'from_sequence', 'to_sequence', 'take',
    'where', 'select', 'select_many', 'concat', 'zip_with', 'interleave', 'flatten',
    'skip', 'skip_while', 'element_at',
    'recursive',
]
