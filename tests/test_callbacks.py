from kazoo.exceptions import NoNodeError
from kazoo.protocol.states import ZnodeStat
from kazoo.security import OPEN_ACL_UNSAFE

import zkwrap


class Completed:
    """ Just enough of kazoo's IAsyncResult for the adapters.
    """

    def __init__(self, value=None, exception=None):
        self.value = value
        self.exception = exception


stat = ZnodeStat(1, 2, 3, 4, 5, 6, 7, 0, 9, 2, 11)


def adapt(adapter, completed):

    received = list()
    completion = adapter(received.append, '/foo', 'ctx')
    completion(completed)

    assert len(received) == 1
    return received[0]


def test_string_callback():

    result = adapt(zkwrap.callbacks.string_callback, Completed('/foo0000000001'))
    assert result == {'status_code': 0, 'path': '/foo', 'context': 'ctx', 'name': '/foo0000000001'}


def test_stat_callback():

    result = adapt(zkwrap.callbacks.stat_callback, Completed(stat))
    assert result['status_code'] == 0
    assert result['stat']['version'] == 5


def test_exists_callback():

    result = adapt(zkwrap.callbacks.exists_callback, Completed(stat))
    assert result['status_code'] == 0
    assert result['stat']['mzxid'] == 2

    # kazoo completes exists() on a missing node successfully, with no stat.

    result = adapt(zkwrap.callbacks.exists_callback, Completed(None))
    assert result['status_code'] == zkwrap.translate.NO_NODE
    assert result['stat'] is None

    result = adapt(zkwrap.callbacks.exists_callback, Completed(exception=NoNodeError()))
    assert result['status_code'] == zkwrap.translate.NO_NODE


def test_children_callback():

    result = adapt(zkwrap.callbacks.children_callback, Completed((['a', 'b'], stat)))
    assert result['children'] == ['a', 'b']
    assert result['stat']['num_children'] == 2


def test_void_callback():

    result = adapt(zkwrap.callbacks.void_callback, Completed(True))
    assert result == {'status_code': 0, 'path': '/foo', 'context': 'ctx'}


def test_data_callback():

    result = adapt(zkwrap.callbacks.data_callback, Completed((b'hello', stat)))
    assert result['data'] == b'hello'
    assert result['stat']['data_length'] == 9


def test_acl_callback():

    result = adapt(zkwrap.callbacks.acl_callback, Completed((OPEN_ACL_UNSAFE, stat)))
    assert result['acl'] == list(OPEN_ACL_UNSAFE)
    assert result['stat']['aversion'] == 7


def test_failure():

    completed = Completed(exception=NoNodeError())

    for adapter in (zkwrap.callbacks.children_callback, zkwrap.callbacks.data_callback, zkwrap.callbacks.acl_callback):
        result = adapt(adapter, completed)
        assert result['status_code'] == zkwrap.translate.NO_NODE
        assert result['path'] == '/foo'
        assert result['context'] == 'ctx'
        assert result['stat'] is None


def test_promise_ordering():
    """ The pending handle must be resolved before the callback sees the
        same result record.
    """

    pending = zkwrap.pending.Pending()
    observed = list()

    def callback(result):
        observed.append((pending.poll(), result))

    handler = zkwrap.callbacks.promise_callback(pending, callback)
    record = {'status_code': 0, 'path': '/foo', 'context': '/foo'}
    handler(record)

    assert observed == [(True, record)]
    assert pending.wait(0) is record


def test_promise_without_callback():

    pending = zkwrap.pending.Pending()
    handler = zkwrap.callbacks.promise_callback(pending)
    handler({'status_code': 0})

    assert pending.poll() == True


def test_promise_failing_callback():

    pending = zkwrap.pending.Pending()

    def callback(result):
        raise ValueError('callback failure')

    handler = zkwrap.callbacks.promise_callback(pending, callback)

    try:
        handler({'status_code': 0})
    except ValueError:
        pass

    assert pending.poll() == True
    assert pending.result == {'status_code': 0}


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
