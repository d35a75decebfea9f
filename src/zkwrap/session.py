""" Establishing a ZooKeeper session, and the :class:`Client` handle that
    every other operation requires.
"""

import logging
import threading

from kazoo.client import KazooClient
from kazoo.protocol.states import Callback

from . import translate
from .options import ConnectOptions
from .watcher import make_watcher

log = logging.getLogger(__name__)


class Client:
    """ A :class:`Client` wraps an established kazoo session. The kazoo
        client itself is available as the *zk* attribute; it is safe to share
        a single :class:`Client` across threads.

        The *watcher*, if any, is invoked with a translated event for every
        change in the session state, and for any watch registered by an
        operation invoked with ``watch=True``. It is called on the kazoo
        callback thread.

        :ivar zk: The underlying :class:`kazoo.client.KazooClient`.
        :ivar watcher: The session-wide watch handler, or None.
    """

    def __init__(self, zk, watcher=None):

        self.zk = zk
        self.watcher = watcher
        self.connected = threading.Event()
        self.default_watcher = make_watcher(self._session_event)


    def _listener(self, kazoo_state):
        """ Connection state listener registered with kazoo. This runs on
            kazoo's connection thread, which must never block; forwarding
            the event to the session watcher is handed off to the callback
            thread, the same thread that delivers watch events.
        """

        event = translate.session_event(self.zk.client_state)

        if translate.released(kazoo_state):
            self.connected.set()

        callback = Callback('session', self._session_event, (event,))
        self.zk.handler.dispatch_callback(callback)


    def _session_event(self, event):

        watcher = self.watcher

        if watcher is not None:
            watcher(event)


    def close(self):
        """ End the session. Any ephemeral nodes owned by the session will
            be removed by the server.
        """

        self.zk.stop()
        self.zk.close()
        self.zk.remove_listener(self._listener)


    def start(self, timeout=None):
        """ Initiate the session and block until the server reports that
            it is connected. The *timeout*, in seconds, is None by default,
            meaning wait indefinitely. Returns True if the session is
            connected, False if the *timeout* expired first.
        """

        self.zk.add_listener(self._listener)
        self.zk.start_async()

        return self.connected.wait(timeout)


    @property
    def state(self):
        """ The current state of the client, one of the names enumerated by
            :func:`translate.client_states`.
        """

        return translate.client_state(self.zk.client_state)


# end of class Client



def connect(hosts=None, **kwargs):
    """ Establish a session with the ZooKeeper ensemble at *hosts*, a
        comma-separated list of host:port pairs, and return a :class:`Client`
        once the session is usable. Recognized options are *timeout*, the
        session timeout in milliseconds (5000 by default), and *watcher*,
        a function that receives every session event.

        Example::

            def watcher(event):
                print('event received:', event)

            client = zkwrap.connect('127.0.0.1:2181', watcher=watcher)
    """

    options = ConnectOptions(hosts, **kwargs)
    log.debug("connecting to %s, session timeout %d ms", options.hosts, options.timeout)

    zk = KazooClient(hosts=options.hosts, timeout=options.timeout / 1000.0)
    client = Client(zk, options.watcher)
    client.start()

    return client


def register_watcher(client, watcher):
    """ Replace the session-wide watch handler for *client*.
    """

    if watcher is not None and not callable(watcher):
        raise TypeError('the watcher must be callable')

    client.watcher = watcher


def state(client):
    """ Return the current state of the *client*: CONNECTING, ASSOCIATING,
        CONNECTED, CLOSED, or AUTH_FAILED.
    """

    return client.state


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
