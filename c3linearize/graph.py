"""
Building and preparing dependency graphs.

A graph maps each key to the tuple of its direct bases, in declaration
order. Graphs are plain insertion-ordered dicts.
"""

from collections import OrderedDict
from collections.abc import Mapping

from c3linearize import log
from c3linearize.util import DEBUG, describe
from .exceptions import DuplicateKeyError

def build_graph(root, bases_function, known=()):
    """
    Compute the closure of ``bases_function`` starting at ``root``.

    Keys are recorded depth-first, in the order a recursive walk would
    first reach them; each key's entry is exactly what ``bases_function``
    returned for it. A key reachable along several paths is looked up
    once. Keys in ``known`` are neither recorded nor expanded, which lets
    a caller skip nodes it has already linearized.
    """
    graph = OrderedDict()
    pending = [root]
    while pending:
        key = pending.pop()
        if key in graph or key in known:
            continue
        bases = tuple(bases_function(key))
        graph[key] = bases
        pending.extend(reversed(bases))

    if DEBUG:
        log.msg("built graph of %d keys from %r using %s" % (len(graph), root, describe(bases_function)))
    return graph

def make_graph(graph):
    """
    Accept a mapping or an iterable of (key, bases) pairs and return a
    graph; a key given twice in pair form is an error, not an overwrite
    """
    if isinstance(graph, Mapping):
        pairs = graph.items()
    else:
        pairs = graph

    result = OrderedDict()
    for key, bases in pairs:
        if key in result:
            raise DuplicateKeyError(key)
        result[key] = tuple(bases)
    return result

def sort_by_base_count(graph):
    "Stable sort of a graph's entries: keys with fewer direct bases first"
    return OrderedDict(sorted(make_graph(graph).items(), key=lambda item: len(item[1])))
