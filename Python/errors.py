class InvalidArgument(TypeError):
    """A required function or iterable argument is missing or unusable"""


class IndexOutOfRange(IndexError):
    """Index is negative or lies beyond the end of a stream"""


class UnboundSlot(LookupError):
    """A slot was read before it was bound, or bound twice"""


class ReentrantForce(RuntimeError):
    """A promise was forced again while its producer was still running"""


def require_callable(func, name):
    if not callable(func):
        raise InvalidArgument('{} must be callable, got {!r}'.format(name, func))
    return func
