""" The handle returned by any asynchronous operation. """

from __future__ import annotations

import threading
from typing import Optional


class Pending:
    """ A :class:`Pending` instance represents an in-flight asynchronous
        request. It is resolved exactly once, by the kazoo callback thread,
        with the canonical result record for the request; any number of
        other threads may block in :func:`wait` until that happens.

        :ivar result: The result record, or None while the request is
            still outstanding.
    """

    def __init__(self):

        self.result: Optional[dict] = None
        self.rep_event = threading.Event()
        self.rep_lock = threading.Lock()


    def __repr__(self):

        if self.rep_event.is_set():
            return 'Pending: ' + repr(self.result)
        else:
            return 'Pending: unresolved'


    def _complete(self, result: dict) -> None:
        """ Locally store the result and signal any callers blocking via
            :func:`wait` to proceed. Resolving the same handle twice is an
            error.
        """

        with self.rep_lock:
            if self.rep_event.is_set():
                raise RuntimeError('pending operation already resolved')

            self.result = result
            self.rep_event.set()


    def poll(self) -> bool:
        """ Return True if the request is complete, otherwise return False.
        """

        return self.rep_event.is_set()


    def wait(self, timeout: Optional[float] = None) -> Optional[dict]:
        """ Block until the request has been handled. This is a wrapper to
            a :class:`threading.Event` instance; if the *timeout* argument
            is None it will block indefinitely. The result record is always
            returned; it will be None if the request is still pending when
            the *timeout* expires.
        """

        self.rep_event.wait(timeout)
        return self.result


# end of class Pending


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
