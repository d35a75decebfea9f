""" Adapt a plain function into a kazoo watch. """

from . import translate


def make_watcher(handler):
    """ Return a callable suitable for use as a kazoo watch. kazoo invokes
        a watch with a single :class:`kazoo.protocol.states.WatchedEvent`;
        the returned callable translates that event via
        :func:`translate.event_to_map` and hands the result to *handler*.
        No filtering is done here, the *handler* receives every event.

        A watch fires at most once. Observing further changes requires a
        new watch, typically registered from within the *handler*.
    """

    if callable(handler):
        pass
    else:
        raise TypeError('the watch handler must be callable')

    def watcher(event):
        handler(translate.event_to_map(event))

    return watcher


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
