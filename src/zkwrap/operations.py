""" The node operations. Every function here can be invoked in one of two
    ways:

    * Synchronously, the default. The call blocks until the server responds
      and returns the result directly; failures raise the kazoo exception
      describing the failure.

    * Asynchronously, if a *callback* is supplied or *wait* is set to False.
      The call returns a :class:`zkwrap.pending.Pending` instance without
      blocking; the result record (see :mod:`zkwrap.callbacks`) becomes
      available from :func:`zkwrap.pending.Pending.wait` once the server
      responds, and is also handed to the *callback*, if any. Failures are
      reported via the *status_code* in the result record, never raised.

    A few failures are considered normal outcomes in synchronous mode:
    :func:`create` returns False if the node already exists, and
    :func:`delete` and :func:`children` return False if the node does not
    exist. Asynchronous callers always see the actual status code.

    Example::

        def callback(result):
            print('got callback result:', result)

        zkwrap.create(client, '/baz', persistent=True)
        pending = zkwrap.create(client, '/baz/1', callback=callback)
        pending.wait()
        zkwrap.create(client, '/baz/2-', wait=False, sequential=True).wait()
"""

import logging
import types

from kazoo.exceptions import KazooException
from kazoo.exceptions import NodeExistsError
from kazoo.exceptions import NoNodeError

from . import callbacks
from . import translate
from .options import ChildrenOptions
from .options import CreateOptions
from .options import DataOptions
from .options import DeleteOptions
from .options import ExistsOptions
from .options import GetAclOptions
from .options import SetDataOptions
from .pending import Pending
from .watcher import make_watcher

log = logging.getLogger(__name__)


create_modes = types.MappingProxyType({
    # The node is not deleted when the session ends.
    (True, False): 'PERSISTENT',
    # As above, and the server appends a monotonically increasing counter
    # to the requested name.
    (True, True): 'PERSISTENT_SEQUENTIAL',
    # The node is deleted when the session ends.
    (False, False): 'EPHEMERAL',
    (False, True): 'EPHEMERAL_SEQUENTIAL',
})

# The flags kazoo expects for each creation mode.

_mode_flags = types.MappingProxyType({
    'PERSISTENT': dict(ephemeral=False, sequence=False),
    'PERSISTENT_SEQUENTIAL': dict(ephemeral=False, sequence=True),
    'EPHEMERAL': dict(ephemeral=True, sequence=False),
    'EPHEMERAL_SEQUENTIAL': dict(ephemeral=True, sequence=True),
})


def create_mode(persistent, sequential):
    """ Return the name of the creation mode selected by the two flags.
    """

    return create_modes[(bool(persistent), bool(sequential))]



def _debug(operation, exception):

    code = translate.status_code(exception)
    log.debug("%s: %s thrown: code: %d, exception: %s", operation, exception.__class__.__name__, code, exception)


def _watch(client, options):
    """ Return the watch, if any, to register with kazoo. An explicit
        *watcher* function takes precedence over ``watch=True``, which
        registers the session-wide watcher.
    """

    if options.watcher is not None:
        return make_watcher(options.watcher)

    if options.watch == True:
        return client.default_watcher

    return None


def _asynchronous(client, options, adapter, path, request):
    """ Issue the *request* and return a :class:`Pending` instance that will
        be resolved with the result record. The *adapter* is one of the
        result adapters in :mod:`callbacks`, appropriate for the *request*.

        kazoo may reject a request outright, before it is sent, for example
        if the session is closed. That failure is delivered, and logged,
        through the result record like any other.
    """

    pending = Pending()
    handler = callbacks.promise_callback(pending, options.callback)
    completion = adapter(handler, path, options.context)

    try:
        async_result = request()
    except KazooException as e:
        async_result = client.zk.handler.async_result()
        async_result.set_exception(e)

    async_result.rawlink(completion)
    return pending



def exists(client, path, **kwargs):
    """ Return the metadata for the node at *path*, or None if it does
        not exist. Recognized options are *watcher*, *watch*, *wait*,
        *callback*, and *context*.

        Example::

            zkwrap.exists(client, '/yadda', watch=True)
            pending = zkwrap.exists(client, '/yadda', wait=False)
            pending.wait()['stat']
    """

    options = ExistsOptions(path, **kwargs)
    watch = _watch(client, options)

    if options.asynchronous:
        request = lambda: client.zk.exists_async(path, watch=watch)
        return _asynchronous(client, options, callbacks.exists_callback, path, request)

    try:
        stat = client.zk.exists(path, watch=watch)
    except KazooException as e:
        _debug('exists', e)
        raise

    return translate.stat_to_map(stat)


def create(client, path, **kwargs):
    """ Create a node, returning its actual name; for a sequential node
        this differs from the requested *path*. Returns False if the node
        already exists.

        Recognized options are *data*, *acl*, *persistent*, *sequential*,
        *wait*, *callback*, and *context*; see :class:`options.CreateOptions`
        for the defaults.
    """

    options = CreateOptions(path, **kwargs)

    data = options.data
    if data is None:
        data = b''

    mode = create_mode(options.persistent, options.sequential)
    flags = _mode_flags[mode]

    if options.asynchronous:
        request = lambda: client.zk.create_async(path, data, acl=options.acl, **flags)
        return _asynchronous(client, options, callbacks.string_callback, path, request)

    try:
        name = client.zk.create(path, data, acl=options.acl, **flags)
    except NodeExistsError:
        log.debug("tried to create an existing node: %s", path)
        return False
    except KazooException as e:
        _debug('create', e)
        raise

    return name


def delete(client, path, **kwargs):
    """ Delete the node at *path*, returning True. Returns False if the node
        does not exist. Recognized options are *version*, *wait*,
        *callback*, and *context*.
    """

    options = DeleteOptions(path, **kwargs)

    if options.asynchronous:
        request = lambda: client.zk.delete_async(path, version=options.version)
        return _asynchronous(client, options, callbacks.void_callback, path, request)

    try:
        client.zk.delete(path, version=options.version)
    except NoNodeError:
        log.debug("tried to delete a non-existent node: %s", path)
        return False
    except KazooException as e:
        _debug('delete', e)
        raise

    return True


def children(client, path, **kwargs):
    """ Return a list of the names of the children of *path*, in no
        particular order. Returns False if the node does not exist.
        Recognized options are *watcher*, *watch*, *wait*, *callback*, and
        *context*.

        Example::

            zkwrap.create(client, '/foo', persistent=True)
            for count in range(5):
                zkwrap.create(client, '/foo/child-', sequential=True)

            zkwrap.children(client, '/foo')
            zkwrap.children(client, '/foo', wait=False, watcher=print).wait()
    """

    options = ChildrenOptions(path, **kwargs)
    watch = _watch(client, options)

    if options.asynchronous:
        request = lambda: client.zk.get_children_async(path, watch=watch, include_data=True)
        return _asynchronous(client, options, callbacks.children_callback, path, request)

    try:
        names = client.zk.get_children(path, watch=watch)
    except NoNodeError:
        log.debug("tried to list children of a non-existent node: %s", path)
        return False
    except KazooException as e:
        _debug('children', e)
        raise

    return list(names)


def data(client, path, **kwargs):
    """ Return a dictionary with the *data* held by the node at *path*, as
        bytes, and the *stat* metadata from the same read. Recognized
        options are *watcher*, *watch*, *wait*, *callback*, and *context*.
    """

    options = DataOptions(path, **kwargs)
    watch = _watch(client, options)

    if options.asynchronous:
        request = lambda: client.zk.get_async(path, watch=watch)
        return _asynchronous(client, options, callbacks.data_callback, path, request)

    try:
        value, stat = client.zk.get(path, watch=watch)
    except KazooException as e:
        _debug('data', e)
        raise

    result = dict()
    result['data'] = value
    result['stat'] = translate.stat_to_map(stat)

    return result


def set_data(client, path, data, version, **kwargs):
    """ Replace the data held by the node at *path*, returning the updated
        metadata. The *version* must match the current version of the node,
        or be -1 to match any version. Recognized options are *wait*,
        *callback*, and *context*.

        Example::

            zkwrap.set_data(client, '/foo', b'Hello World', 0)
            zkwrap.set_data(client, '/foo', b'New Data', 1, callback=print)
    """

    options = SetDataOptions(path, **kwargs)

    if options.asynchronous:
        request = lambda: client.zk.set_async(path, data, version=version)
        return _asynchronous(client, options, callbacks.stat_callback, path, request)

    try:
        stat = client.zk.set(path, data, version=version)
    except KazooException as e:
        _debug('set_data', e)
        raise

    return translate.stat_to_map(stat)


def get_acl(client, path, **kwargs):
    """ Return a dictionary with the *acl*, a list of
        :class:`kazoo.security.ACL` instances, and the *stat* metadata for
        the node at *path*. Recognized options are *wait*, *callback*, and
        *context*.
    """

    options = GetAclOptions(path, **kwargs)

    if options.asynchronous:
        request = lambda: client.zk.get_acls_async(path)
        return _asynchronous(client, options, callbacks.acl_callback, path, request)

    try:
        acl, stat = client.zk.get_acls(path)
    except KazooException as e:
        _debug('get_acl', e)
        raise

    result = dict()
    result['acl'] = list(acl)
    result['stat'] = translate.stat_to_map(stat)

    return result


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
