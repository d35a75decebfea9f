import pytest

import fakezk
import zkwrap


@pytest.fixture
def zk():

    fake = fakezk.FakeKazoo()

    yield fake

    fake.close()


@pytest.fixture
def client(zk):

    # Bypass connect(), which would construct a real KazooClient, but
    # otherwise establish the session the same way.

    instance = zkwrap.Client(zk)
    connected = instance.start(timeout=5)
    assert connected == True

    yield instance


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
