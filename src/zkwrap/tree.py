""" Operations on entire subtrees. Both functions are composed of blocking
    calls to :mod:`zkwrap.operations`; there is no asynchronous form.
"""

from . import operations


def _reject_asynchronous(options):

    if options.get('callback') is not None or options.get('wait', True) == False:
        raise ValueError('tree operations do not support asynchronous requests')


def _join(parent, child):

    if parent.endswith('/'):
        return parent + child
    else:
        return parent + '/' + child


def segments(path):
    """ Return the non-empty components of *path*, in order from the root.
    """

    return [segment for segment in path.split('/') if segment != '']


def create_all(client, path, **options):
    """ Create a node and any missing parents. Parents are created as plain
        persistent nodes; the *options*, which are the same as for
        :func:`operations.create`, only apply to the last node. Nodes that
        already exist are left alone. Returns the path of the last node,
        which for a sequential node is its actual name.

        Example::

            zkwrap.create_all(client, '/foo/bar/baz', persistent=True)
            zkwrap.create_all(client, '/foo/bar/baz/n-', sequential=True)
    """

    _reject_asynchronous(options)

    names = segments(path)
    last = len(names) - 1
    parent = ''

    for index in range(len(names)):
        node = _join(parent, names[index])

        if operations.exists(client, node) is not None:
            parent = node
            continue

        if index < last:
            created = operations.create(client, node, persistent=True)
        else:
            created = operations.create(client, node, **options)

        # False means another client created the node in the meantime.

        if created == False:
            parent = node
        else:
            parent = created

    if parent == '':
        parent = '/'

    return parent


def delete_all(client, path, **options):
    """ Delete a node and all of its descendants, deepest first. The
        *options*, which are the same as for :func:`operations.delete`, apply
        to every deletion. Returns the result of deleting *path* itself,
        False if it did not exist.
    """

    _reject_asynchronous(options)

    names = operations.children(client, path)

    if names:
        for name in names:
            delete_all(client, _join(path, name), **options)

    return operations.delete(client, path, **options)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
