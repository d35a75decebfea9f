""" Option handling for the operations in :mod:`zkwrap.operations`. Each
    operation recognizes a fixed set of keyword arguments; the classes here
    enumerate those arguments along with their default values, and reject
    anything unrecognized.

    The options shared by every node operation:

    *wait*
        Block until the request completes; this is the default behavior.
        If *wait* is set to False the operation returns a
        :class:`zkwrap.pending.Pending` instance immediately.

    *callback*
        A function to invoke with the result record once the request
        completes. Supplying a callback implies ``wait=False``.

    *context*
        An arbitrary value copied into the result record, allowing a
        callback to correlate results with requests. Defaults to the path.
"""

from __future__ import annotations

import os

from kazoo.security import OPEN_ACL_UNSAFE


class Options:
    """ Base class for per-operation options. Subclasses declare their
        recognized keyword arguments and default values in *defaults*.
    """

    operation = None
    defaults = dict()

    def __init__(self, path: str, **kwargs):

        for key, value in self.defaults.items():
            setattr(self, key, value)

        for key, value in kwargs.items():
            if key in self.defaults:
                pass
            else:
                raise TypeError("%s() got an unexpected option '%s'" % (self.operation, key))

            setattr(self, key, value)

        if self.context is None:
            self.context = path

        if self.callback is not None and not callable(self.callback):
            raise TypeError('the callback must be callable')


    def __repr__(self):

        values = list()
        for key in sorted(self.defaults.keys()):
            values.append('%s=%r' % (key, getattr(self, key)))

        return "%s(%s)" % (self.__class__.__name__, ', '.join(values))


    @property
    def asynchronous(self) -> bool:
        """ True if the operation should return a pending handle instead of
            blocking for the result.
        """

        return self.callback is not None or self.wait == False


# end of class Options



class ExistsOptions(Options):

    operation = 'exists'
    defaults = dict(watcher=None, watch=False, wait=True, callback=None, context=None)


class CreateOptions(Options):
    """ *data* is the initial content of the node, as bytes. *acl* is a
        list of :class:`kazoo.security.ACL` instances, by default a
        completely open ACL. *persistent* and *sequential* select the
        creation mode; the default is an ephemeral, non-sequential node.
    """

    operation = 'create'
    defaults = dict(data=b'', acl=OPEN_ACL_UNSAFE, persistent=False, sequential=False, wait=True, callback=None, context=None)


class DeleteOptions(Options):
    """ A *version* of -1 matches any version of the node.
    """

    operation = 'delete'
    defaults = dict(version=-1, wait=True, callback=None, context=None)


class DataOptions(Options):

    operation = 'data'
    defaults = dict(watcher=None, watch=False, wait=True, callback=None, context=None)


class SetDataOptions(Options):

    operation = 'set_data'
    defaults = dict(wait=True, callback=None, context=None)


class ChildrenOptions(Options):

    operation = 'children'
    defaults = dict(watcher=None, watch=False, wait=True, callback=None, context=None)


class GetAclOptions(Options):

    operation = 'get_acl'
    defaults = dict(wait=True, callback=None, context=None)



class ConnectOptions:
    """ Options for :func:`zkwrap.session.connect`. The session *timeout*
        is in milliseconds. The *watcher* receives every session event,
        and any watch registered with ``watch=True``.

        If no hosts are specified the ZKWRAP_HOSTS environment variable is
        consulted, falling back to a server on the local host.
    """

    default_hosts = '127.0.0.1:2181'
    defaults = dict(timeout=5000, watcher=None)

    def __init__(self, hosts=None, **kwargs):

        if hosts is None:
            hosts = os.environ.get('ZKWRAP_HOSTS', self.default_hosts)

        self.hosts = hosts

        for key, value in self.defaults.items():
            setattr(self, key, value)

        for key, value in kwargs.items():
            if key in self.defaults:
                pass
            else:
                raise TypeError("connect() got an unexpected option '%s'" % (key))

            setattr(self, key, value)

        self.timeout = int(self.timeout)

        if self.watcher is not None and not callable(self.watcher):
            raise TypeError('the watcher must be callable')


# end of class ConnectOptions


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
