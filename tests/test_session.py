import threading
import time

import pytest

import fakezk
import zkwrap


def test_state(client):

    assert zkwrap.state(client) == 'CONNECTED'
    assert zkwrap.state(client) in zkwrap.client_states()


def test_start_blocks_until_connected():

    zk = fakezk.FakeKazoo(connect_delay=0.1)
    client = zkwrap.Client(zk)

    begin = time.time()
    connected = client.start()
    elapsed = time.time() - begin

    assert connected == True
    assert elapsed >= 0.09
    assert client.state == 'CONNECTED'

    zk.close()


def test_start_timeout():

    zk = fakezk.FakeKazoo(connect_delay=1)
    client = zkwrap.Client(zk)

    assert client.start(timeout=0.01) == False
    assert client.state == 'CONNECTING'

    zk.close()


def test_session_events():

    events = list()
    connected = threading.Event()
    closed = threading.Event()

    def watcher(event):
        events.append(event)
        if event['connection_state'] == 'CONNECTED':
            connected.set()
        if event['connection_state'] == 'CLOSED':
            closed.set()

    zk = fakezk.FakeKazoo()
    client = zkwrap.Client(zk, watcher)
    client.start()

    # The first CONNECTED event is forwarded too.

    assert connected.wait(5) == True
    assert events[0] == {'event_type': 'NONE', 'connection_state': 'CONNECTED', 'path': None}

    zk.suspend()
    assert zkwrap.state(client) == 'CONNECTING'

    client.close()

    assert closed.wait(5) == True
    assert [event['connection_state'] for event in events] == ['CONNECTED', 'CONNECTING', 'CLOSED']


def test_register_watcher(client):

    def watcher(event):
        pass

    zkwrap.register_watcher(client, watcher)
    assert client.watcher is watcher

    zkwrap.register_watcher(client, None)
    assert client.watcher is None

    with pytest.raises(TypeError):
        zkwrap.register_watcher(client, 'not callable')


def test_connect_options(monkeypatch):

    monkeypatch.delenv('ZKWRAP_HOSTS', raising=False)
    options = zkwrap.options.ConnectOptions()
    assert options.hosts == '127.0.0.1:2181'
    assert options.timeout == 5000
    assert options.watcher is None

    monkeypatch.setenv('ZKWRAP_HOSTS', 'zk1:2181,zk2:2181')
    options = zkwrap.options.ConnectOptions(timeout=10000)
    assert options.hosts == 'zk1:2181,zk2:2181'
    assert options.timeout == 10000

    with pytest.raises(TypeError):
        zkwrap.connect('127.0.0.1:2181', timeout_msec=10)

    with pytest.raises(TypeError):
        zkwrap.options.ConnectOptions(watcher='not callable')


def test_connect(monkeypatch):
    """ connect() hands the hosts and the session timeout, in seconds, to
        the kazoo client it creates.
    """

    arguments = dict()

    def factory(hosts, timeout):
        arguments['hosts'] = hosts
        arguments['timeout'] = timeout
        return fakezk.FakeKazoo()

    monkeypatch.setattr(zkwrap.session, 'KazooClient', factory)

    client = zkwrap.connect('zk1:2181', timeout=2500)

    assert arguments == {'hosts': 'zk1:2181', 'timeout': 2.5}
    assert client.state == 'CONNECTED'

    client.zk.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
