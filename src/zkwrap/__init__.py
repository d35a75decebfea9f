""" Python convenience layer for Apache ZooKeeper, built on kazoo. ZooKeeper
    provides name service, configuration, and group membership; this package
    offers every node operation in both a blocking and a non-blocking form,
    along with recursive tree operations and ACL helpers.
"""

# Utility components.

from . import translate

# Submodules used by multiple other components.

from . import callbacks
from . import options
from . import pending
from . import watcher

# Primary public-facing interfaces.

from . import json
from . import operations
from . import security
from . import session
from . import tree

from .session import Client, connect, register_watcher, state
from .operations import exists, create, delete, children, data, set_data, get_acl
from .tree import create_all, delete_all
from .security import perms, perm_or, acls, acl, acl_id, add_auth_info
from .translate import event_types, keeper_states, client_states
from .watcher import make_watcher

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
