"""
A promise is a nullary computation that runs at most once.

The first `force` runs the producer and remembers the outcome. Later calls
return the remembered value. A producer that raises is remembered as well:
the same exception is raised again on every later `force` and the producer
is never invoked a second time. Forcing a promise from inside its own
producer raises ReentrantForce.
"""

import logging

from errors import ReentrantForce, require_callable

logger = logging.getLogger(__name__)

PENDING, RUNNING, DONE, FAILED = 'pending', 'running', 'done', 'failed'


class Delayed:
    def __init__(self, producer):
        self._producer = require_callable(producer, 'producer')
        self._state = PENDING
        self._value = None
        self._error = None

    @property
    def is_realized(self):
        return self._state in (DONE, FAILED)

    def force(self):
        if self._state == PENDING:
            producer, self._producer = self._producer, None
            self._state = RUNNING
            try:
                self._value = producer()
            except BaseException as e:
                logger.debug('caching failure of %r: %r', producer, e)
                self._error = e
                self._state = FAILED
                raise
            self._state = DONE
        elif self._state == RUNNING:
            raise ReentrantForce('promise forced while being forced')
        if self._state == FAILED:
            raise self._error
        return self._value

    def __repr__(self):
        if self._state == FAILED:
            return 'Delayed(<failed: {!r}>)'.format(self._error)
        if self._state == DONE:
            return 'Delayed({!r})'.format(self._value)
        return 'Delayed(<{}>)'.format(self._state)


def delay(producer):
    return Delayed(producer)
