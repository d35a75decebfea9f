""" Completion callbacks for asynchronous kazoo requests.

    Every kazoo ``*_async`` method returns an
    :class:`kazoo.interfaces.IAsyncResult`; a function registered with its
    ``rawlink()`` method is invoked on the kazoo callback thread with the
    completed async result as its sole argument. The shape of the value
    inside that result differs for each request type. The adapters defined
    here normalize all of them into one dictionary, the result record::

        {'status_code': 0, 'path': '/foo', 'context': '/foo', 'stat': {...}}

    The *status_code* is zero for success, or the ZooKeeper error code for
    a failed request; the payload fields (*name*, *stat*, *children*,
    *data*, *acl*) are None when the request failed.

    These functions run on the kazoo callback thread, which also delivers
    every other completion and watch event for the session. Anything that
    takes time belongs in another thread.
"""

import logging

from . import translate

log = logging.getLogger(__name__)


def _outcome(async_result, path, context):
    """ Unpack a completed async result into the common fields of a result
        record, and the raw value (None on failure).
    """

    exception = async_result.exception
    code = translate.status_code(exception)

    if exception is None:
        value = async_result.value
    else:
        log.debug("%s: %s: code: %d", path, exception.__class__.__name__, code)
        value = None

    result = dict()
    result['status_code'] = code
    result['path'] = path
    result['context'] = context

    return result, value


def string_callback(handler, path, context):

    def completion(async_result):
        result, name = _outcome(async_result, path, context)
        result['name'] = name
        handler(result)

    return completion


def stat_callback(handler, path, context):

    def completion(async_result):
        result, stat = _outcome(async_result, path, context)
        result['stat'] = translate.stat_to_map(stat)
        handler(result)

    return completion


def exists_callback(handler, path, context):
    """ kazoo reports a missing node as a successful request with no stat;
        the result record reports it as the server does, with NO_NODE.
    """

    def completion(async_result):
        result, stat = _outcome(async_result, path, context)

        if stat is None and result['status_code'] == translate.OK:
            log.debug("%s: no node: code: %d", path, translate.NO_NODE)
            result['status_code'] = translate.NO_NODE

        result['stat'] = translate.stat_to_map(stat)
        handler(result)

    return completion


def children_callback(handler, path, context):
    """ The request must be issued with ``include_data=True`` so that the
        async result holds a (children, stat) tuple.
    """

    def completion(async_result):
        result, value = _outcome(async_result, path, context)

        if value is None:
            children = None
            stat = None
        else:
            children, stat = value
            children = list(children)

        result['children'] = children
        result['stat'] = translate.stat_to_map(stat)
        handler(result)

    return completion


def void_callback(handler, path, context):

    def completion(async_result):
        result, ignored = _outcome(async_result, path, context)
        handler(result)

    return completion


def data_callback(handler, path, context):

    def completion(async_result):
        result, value = _outcome(async_result, path, context)

        if value is None:
            data = None
            stat = None
        else:
            data, stat = value

        result['data'] = data
        result['stat'] = translate.stat_to_map(stat)
        handler(result)

    return completion


def acl_callback(handler, path, context):

    def completion(async_result):
        result, value = _outcome(async_result, path, context)

        if value is None:
            acl = None
            stat = None
        else:
            acl, stat = value
            acl = list(acl)

        result['acl'] = acl
        result['stat'] = translate.stat_to_map(stat)
        handler(result)

    return completion


def promise_callback(pending, callback=None):
    """ Return a handler that first resolves the :class:`pending.Pending`
        instance with the result record, and then, if a *callback* was
        provided, invokes it with the same record. Anyone blocked on the
        pending handle is released before the callback runs; an exception
        raised by the callback has no effect on the handle.
    """

    def handler(result):
        pending._complete(result)

        if callback is not None:
            callback(result)

    return handler


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
