""" Access control: permission flags, ACL construction, and registration
    of authentication credentials with a session.
"""

import logging
import types

from kazoo.exceptions import KazooException
from kazoo.security import ACL
from kazoo.security import ANYONE_ID_UNSAFE
from kazoo.security import AUTH_IDS
from kazoo.security import CREATOR_ALL_ACL
from kazoo.security import Id
from kazoo.security import OPEN_ACL_UNSAFE
from kazoo.security import Permissions
from kazoo.security import READ_ACL_UNSAFE

from . import translate

log = logging.getLogger(__name__)


perms = types.MappingProxyType({
    'read': Permissions.READ,
    'write': Permissions.WRITE,
    'create': Permissions.CREATE,
    'delete': Permissions.DELETE,
    'admin': Permissions.ADMIN,
})


acls = types.MappingProxyType({
    # A completely open ACL.
    'open_acl_unsafe': OPEN_ACL_UNSAFE,
    # This Id represents anyone.
    'anyone_id_unsafe': ANYONE_ID_UNSAFE,
    # This Id is only usable to set ACLs.
    'auth_ids': AUTH_IDS,
    # All permissions for the creator's authenticated ids.
    'creator_all_acl': CREATOR_ALL_ACL,
    # Anyone can read.
    'read_acl_unsafe': READ_ACL_UNSAFE,
})


def perm_or(*names):
    """ Return the bitwise OR of the named permissions. Valid names are the
        keys of :data:`perms`.

        Example::

            zkwrap.perm_or('read', 'write', 'create')
    """

    mask = 0

    for name in names:
        try:
            mask |= perms[name]
        except KeyError:
            raise KeyError('unknown permission: ' + repr(name))

    return mask


def acl_id(scheme, id_value):
    return Id(scheme, id_value)


def acl(scheme, id_value, perm, *more_perms):
    """ Return an ACL entry granting the named permissions to the identity
        described by *scheme* and *id_value*.

        Example::

            open_acl = zkwrap.acl('world', 'anyone', 'read', 'create', 'delete', 'admin', 'write')
            zkwrap.create(client, '/mynode', acl=[open_acl])

            zkwrap.add_auth_info(client, 'digest', 'david:secret')
            auth_acl = zkwrap.acl('auth', '', 'read', 'create', 'delete', 'admin', 'write')
            zkwrap.create(client, '/mynode2', acl=[auth_acl])
    """

    mask = perm_or(perm, *more_perms)
    return ACL(mask, acl_id(scheme, id_value))


def add_auth_info(client, scheme, auth):
    """ Register credentials with the session. The *auth* credential is
        opaque to this layer; it may be provided as a string or as bytes.
        kazoo only transmits text credentials, so bytes must be valid UTF-8.
    """

    if isinstance(auth, (bytes, bytearray)):
        try:
            auth = bytes(auth).decode('utf-8')
        except UnicodeDecodeError:
            log.debug("add_auth_info: %s credential is not UTF-8", scheme)
            raise TypeError('credentials provided as bytes must be UTF-8 encoded')

    try:
        client.zk.add_auth(scheme, auth)
    except KazooException as e:
        code = translate.status_code(e)
        log.debug("add_auth_info: %s thrown: code: %d, exception: %s", e.__class__.__name__, code, e)
        raise


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
