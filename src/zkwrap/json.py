""" Structured node data. ZooKeeper treats the contents of a node as opaque
    bytes, and nothing in :mod:`zkwrap.operations` encodes or decodes data
    implicitly; the functions here store and recover JSON values on top of
    those operations. An empty node holds the value None.

    Example::

        zkwrap.json.create(client, '/config', {'hosts': ['zk1', 'zk2']}, persistent=True)
        settings = zkwrap.json.value(client, '/config')['value']
        zkwrap.json.set_value(client, '/config', settings, 0)
"""

import logging

import orjson

from . import callbacks
from . import operations
from . import translate
from .pending import Pending

log = logging.getLogger(__name__)


def encode(value):
    """ Return the bytes to store for *value*. None is stored as an empty
        node.
    """

    if value is None:
        return b''

    return orjson.dumps(value)


def decode(data):

    if data is None or len(data) == 0:
        return None

    try:
        return orjson.loads(data)
    except orjson.JSONDecodeError as e:
        log.debug("node data is not valid JSON: %s", e)
        raise


def create(client, path, value, **kwargs):
    """ Create a node holding the encoded *value*. Options are as for
        :func:`zkwrap.operations.create`, other than *data*.
    """

    return operations.create(client, path, data=encode(value), **kwargs)


def set_value(client, path, value, version, **kwargs):
    """ Replace the value held by the node at *path*; options are as for
        :func:`zkwrap.operations.set_data`.
    """

    return operations.set_data(client, path, encode(value), version, **kwargs)


def value(client, path, **kwargs):
    """ Return a dictionary with the decoded *value* held by the node at
        *path*, the raw *data*, and the *stat* metadata. Options are as for
        :func:`zkwrap.operations.data`.

        In asynchronous mode the *value* is added to the result record.
        Data that does not decode is reported with a *status_code* of
        :data:`zkwrap.translate.SYSTEM_ERROR` and a *value* of None; a
        blocking call raises :class:`orjson.JSONDecodeError` instead.
    """

    callback = kwargs.pop('callback', None)
    wait = kwargs.pop('wait', True)

    if callback is None and wait == True:
        result = operations.data(client, path, **kwargs)
        result['value'] = decode(result['data'])
        return result

    if callback is not None and not callable(callback):
        raise TypeError('the callback must be callable')

    pending = Pending()
    handler = callbacks.promise_callback(pending, callback)

    def decoded(result):
        result['value'] = None

        if result['status_code'] == translate.OK:
            try:
                result['value'] = decode(result['data'])
            except orjson.JSONDecodeError:
                result['status_code'] = translate.SYSTEM_ERROR

        handler(result)

    operations.data(client, path, callback=decoded, **kwargs)
    return pending


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
