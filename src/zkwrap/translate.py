""" Conversion of kazoo's result and event objects into plain Python
    dictionaries. Everything here is side-effect free; a None argument
    always translates to None, rather than a default record.
"""

from kazoo.protocol.states import EventType
from kazoo.protocol.states import KazooState
from kazoo.protocol.states import KeeperState


# Status codes embedded in the canonical result record. Any non-zero code
# is the ZooKeeper error code associated with the failure.

OK = 0
SYSTEM_ERROR = -1
NO_NODE = -101
NODE_EXISTS = -110


_event_types = frozenset((
    EventType.CREATED,
    EventType.DELETED,
    EventType.CHANGED,
    EventType.CHILD,
    'NONE',
))

_keeper_states = frozenset((
    KeeperState.AUTH_FAILED,
    KeeperState.CONNECTED,
    KeeperState.CONNECTED_RO,
    KeeperState.CONNECTING,
    KeeperState.CLOSED,
    KeeperState.EXPIRED_SESSION,
))

# The client state is a coarser view of the keeper state. ASSOCIATING is
# part of the vocabulary but kazoo never reports it; a session it is still
# negotiating is CONNECTING.

_client_states = {
    KeeperState.AUTH_FAILED: 'AUTH_FAILED',
    KeeperState.CONNECTED: 'CONNECTED',
    KeeperState.CONNECTED_RO: 'CONNECTED',
    KeeperState.CONNECTING: 'CONNECTING',
    KeeperState.CLOSED: 'CLOSED',
    KeeperState.EXPIRED_SESSION: 'CLOSED',
}


def event_types():
    """ Return the set of symbolic event type names: CREATED, DELETED,
        CHANGED, CHILD, and NONE (used for session state changes).
    """

    return _event_types


def keeper_states():
    """ Return the set of symbolic connection state names that can appear
        in a translated event.
    """

    return _keeper_states


def client_states():
    """ Return the set of symbolic client state names: CONNECTING,
        ASSOCIATING, CONNECTED, CLOSED, and AUTH_FAILED.
    """

    return frozenset(('ASSOCIATING',)) | frozenset(_client_states.values())


def client_state(keeper_state):
    """ Map a kazoo :class:`KeeperState` onto one of :func:`client_states`.
    """

    try:
        return _client_states[keeper_state]
    except KeyError:
        raise ValueError('unknown keeper state: ' + repr(keeper_state))


def stat_to_map(stat):

    if stat is None:
        return None

    translated = dict()
    translated['czxid'] = stat.czxid
    translated['mzxid'] = stat.mzxid
    translated['ctime'] = stat.ctime
    translated['mtime'] = stat.mtime
    translated['version'] = stat.version
    translated['cversion'] = stat.cversion
    translated['aversion'] = stat.aversion
    translated['ephemeral_owner'] = stat.ephemeralOwner
    translated['data_length'] = stat.dataLength
    translated['num_children'] = stat.numChildren
    translated['pzxid'] = stat.pzxid

    return translated


def event_to_map(event):

    if event is None:
        return None

    translated = dict()
    translated['event_type'] = event.type
    translated['connection_state'] = event.state
    translated['path'] = event.path

    return translated


def session_event(connection_state):
    """ kazoo reports session state changes to listeners as a bare
        :class:`KazooState`, not as a watch event. Build the same
        dictionary :func:`event_to_map` would produce for such a change,
        where *connection_state* is the keeper state current at the time
        of the change.
    """

    translated = dict()
    translated['event_type'] = 'NONE'
    translated['connection_state'] = connection_state
    translated['path'] = None

    return translated


def released(kazoo_state):
    """ Return True if the :class:`KazooState` indicates a usable session.
    """

    return kazoo_state == KazooState.CONNECTED


def status_code(exception):
    """ Return the status code for a completed request: zero if there was
        no *exception*, otherwise the ZooKeeper error code the exception
        carries, or :data:`SYSTEM_ERROR` if it carries none.
    """

    if exception is None:
        return OK

    code = getattr(exception, 'code', None)

    if isinstance(code, int) and code != OK:
        return code

    return SYSTEM_ERROR


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
