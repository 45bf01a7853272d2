import threading

from zope.interface import Attribute, Interface, implementer

from .exceptions import CacheEntryExistsError

class ILinearizationCache(Interface):
    """
    Write-once storage for computed linearizations, keyed by node
    """
    lock = Attribute("reentrant lock held by a Linearizer for the whole of each call "
            "made against this cache")

    def __contains__(key):
        "True if key has been linearized"

    def __getitem__(key):
        "The stored linearization of key, as a tuple; KeyError if missing"

    def __len__():
        "Number of stored linearizations"

    def store(key, linearization):
        """
        Record the linearization of key. An entry never changes once
        stored; storing key again raises CacheEntryExistsError
        """

    def clear():
        "Forget every stored linearization"

    def snapshot():
        "A new dict of every entry, each linearization as a new list"

@implementer(ILinearizationCache)
class LinearizationCache(object):
    """
    Default ILinearizationCache: an insertion-ordered dict behind a lock
    """
    def __init__(self):
        self._entries = {}
        self.lock = threading.RLock()

    def __contains__(self, key):
        return key in self._entries

    def __getitem__(self, key):
        return self._entries[key]

    def __len__(self):
        return len(self._entries)

    def store(self, key, linearization):
        linearization = tuple(linearization)
        with self.lock:
            if key in self._entries:
                raise CacheEntryExistsError(key)
            self._entries[key] = linearization
        return linearization

    def clear(self):
        with self.lock:
            self._entries.clear()

    def snapshot(self):
        with self.lock:
            return dict((key, list(value)) for key, value in self._entries.items())

    def __repr__(self):
        return "<LinearizationCache of %d>" % len(self._entries) # pragma: no cover
