import pytest

import zkwrap


def test_segments():

    assert zkwrap.tree.segments('/a/b/c') == ['a', 'b', 'c']
    assert zkwrap.tree.segments('/') == []


def test_create_all(client, zk):

    path = zkwrap.create_all(client, '/a/b/c', persistent=True)

    assert path == '/a/b/c'
    assert zk.created == [('/a', False, False), ('/a/b', False, False), ('/a/b/c', False, False)]

    for node in ('/a', '/a/b', '/a/b/c'):
        assert zkwrap.exists(client, node)['ephemeral_owner'] == 0


def test_create_all_options_apply_to_last(client, zk):
    """ Intermediate nodes are always plain persistent nodes, whatever the
        options for the final node say.
    """

    path = zkwrap.create_all(client, '/foo/bar/baz/n-', sequential=True, data=b'leaf')

    assert path.startswith('/foo/bar/baz/n-')
    assert path != '/foo/bar/baz/n-'

    assert zk.created[:3] == [('/foo', False, False), ('/foo/bar', False, False), ('/foo/bar/baz', False, False)]
    assert zk.created[3] == (path, True, True)
    assert zkwrap.data(client, path)['data'] == b'leaf'
    assert zkwrap.data(client, '/foo/bar')['data'] == b''


def test_create_all_existing_ancestors(client, zk):

    zkwrap.create_all(client, '/a/b', persistent=True)
    before = len(zk.created)

    assert zkwrap.create_all(client, '/a/b/c/d', persistent=True) == '/a/b/c/d'
    assert zk.created[before:] == [('/a/b/c', False, False), ('/a/b/c/d', False, False)]

    # Everything exists now; nothing further is created.

    assert zkwrap.create_all(client, '/a/b/c/d', persistent=True) == '/a/b/c/d'
    assert len(zk.created) == before + 2


def test_delete_all(client):

    zkwrap.create_all(client, '/a/b', persistent=True)
    zkwrap.create_all(client, '/a/c', persistent=True)
    zkwrap.create_all(client, '/a/c/d/e', persistent=True)

    assert zkwrap.delete_all(client, '/a') == True

    for node in ('/a', '/a/b', '/a/c', '/a/c/d', '/a/c/d/e'):
        assert zkwrap.exists(client, node) is None


def test_delete_all_missing(client):
    assert zkwrap.delete_all(client, '/nowhere') == False


def test_tree_rejects_asynchronous(client):

    with pytest.raises(ValueError):
        zkwrap.create_all(client, '/a/b', wait=False)

    with pytest.raises(ValueError):
        zkwrap.delete_all(client, '/a', callback=print)

    assert zkwrap.exists(client, '/a') is None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
