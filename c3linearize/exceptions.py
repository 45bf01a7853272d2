from c3linearize.util import ExceptionWithMessage

class C3Error(Exception):
    "Base class of everything raised by c3linearize"

class InconsistentHierarchyError(ExceptionWithMessage, C3Error, ValueError):
    "Inconsistent hierarchy while merging {0!r}"
    def __init__(self, sequences):
        self.sequences = [list(sequence) for sequence in sequences]
        ExceptionWithMessage.__init__(self, self.sequences)

class CyclicDependencyError(InconsistentHierarchyError):
    "Cyclic dependency: {0}"
    def __init__(self, cycle):
        self.cycle = list(cycle)
        self.sequences = [self.cycle]
        ExceptionWithMessage.__init__(self, " -> ".join(repr(key) for key in self.cycle))

class DuplicateKeyError(ExceptionWithMessage, C3Error):
    "Duplicate key {0!r}"
    def __init__(self, key):
        self.key = key
        ExceptionWithMessage.__init__(self, key)

class NodeMissingError(ExceptionWithMessage, C3Error, KeyError):
    "{0!r}: no graph entry (needed by {1!r})"
    def __init__(self, key, dependent=None):
        self.key = key
        self.dependent = dependent
        ExceptionWithMessage.__init__(self, key, dependent)

    # KeyError.__str__ would repr() the message
    __str__ = Exception.__str__

class HeadMissingError(NodeMissingError):
    "{0!r}: requested head has no graph entry"
    def __init__(self, key):
        self.key = key
        self.dependent = None
        ExceptionWithMessage.__init__(self, key)

class CacheEntryExistsError(ExceptionWithMessage, C3Error):
    "{0!r} is already linearized; clear the cache before recomputing it"
    def __init__(self, key):
        self.key = key
        ExceptionWithMessage.__init__(self, key)
