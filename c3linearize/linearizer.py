"""
C3 linearization of whole dependency graphs, with a write-once cache
shared by every Linearizer handed the same cache; calls are serialized
on the cache's lock.
"""

from operator import attrgetter

from c3linearize import log
from c3linearize.util import DEBUG, describe
from .cache import ILinearizationCache, LinearizationCache
from .exceptions import CyclicDependencyError, HeadMissingError, NodeMissingError
from .graph import build_graph, make_graph, sort_by_base_count
from .merge import merge

class Linearizer(object):
    """
    Computes and caches linearizations.

    The linearization of a node is the node followed by the C3 merge of
    its bases' linearizations and, when order is preserved, its own base
    list. Each node is linearized once per cache lifetime; results from a
    different graph must not be mixed in, so call clear_cache() before
    reusing a Linearizer on an unrelated graph.
    """
    def __init__(self, cache=None, preserve_order=True):
        if cache is None:
            cache = LinearizationCache()
        elif not ILinearizationCache.providedBy(cache):
            raise TypeError("%r does not provide ILinearizationCache" % (cache,))
        self.results = cache
        self.preserve_order = preserve_order

    def linearize(self, graph, heads=None, preserve_order=None):
        """
        Linearize ``heads`` (default: every key of ``graph``, in graph
        order) and return every cached linearization as a dict of lists.

        :Parameters:
          graph
            mapping or iterable of (key, bases) pairs
          heads
            keys to linearize; their ancestors are linearized on the way
          preserve_order
            add each node's own base list to its merge, keeping declared
            base order; defaults to the Linearizer's setting
        """
        if preserve_order is None:
            preserve_order = self.preserve_order
        graph = make_graph(graph)
        if heads is None:
            heads = list(graph)
        graph = sort_by_base_count(graph)

        with self.results.lock:
            for head in heads:
                self._linearize(head, graph, preserve_order)
            return self.results.snapshot()

    def linearize_all(self, graph):
        "Linearize every key of graph, preserving declared base order"
        return self.linearize(graph, None, True)

    def linearize_heads(self, graph, heads):
        "Linearize only heads (and their ancestors), preserving declared base order"
        return self.linearize(graph, heads, True)

    def mro(self, obj, bases_function):
        """
        Linearize obj, asking bases_function only about nodes that are
        not cached yet, and return the linearization as a list
        """
        with self.results.lock:
            graph = build_graph(obj, bases_function, known=self.results)
            return list(self._linearize(obj, sort_by_base_count(graph), self.preserve_order))

    def clear_cache(self):
        with self.results.lock:
            if DEBUG:
                log.msg("discarding %d cached linearizations" % len(self.results))
            self.results.clear()

    def _linearize(self, head, graph, preserve_order):
        results = self.results
        if head in results:
            if DEBUG:
                log.msg("cache hit for %r" % (head,))
            return results[head]

        try:
            bases = graph[head]
        except KeyError:
            raise HeadMissingError(head)
        # frames of (key, iterator over the bases not visited yet)
        frames = [(head, iter(bases))]
        path = [head]
        visiting = set(path)
        while frames:
            key, remaining = frames[-1]
            for base in remaining:
                if base in results:
                    continue
                if base in visiting:
                    raise CyclicDependencyError(path[path.index(base):] + [base])
                frames.append((base, iter(_bases_of(graph, base, key))))
                path.append(base)
                visiting.add(base)
                break
            else:
                frames.pop()
                visiting.discard(path.pop())

                bases = graph[key]
                sequences = [[key]] + [results[base] for base in bases]
                if preserve_order:
                    sequences.append(bases)
                linearization = results.store(key, merge(sequences))
                if DEBUG:
                    log.msg("linearized %r: %r" % (key, list(linearization)))
        return results[head]

def _bases_of(graph, key, dependent):
    try:
        return graph[key]
    except KeyError:
        raise NodeMissingError(key, dependent)

def mro(obj, bases_function=None):
    """
    Linearize a single object with a fresh cache. Without a bases
    function, obj.__bases__ is used, which for a class gives the same
    order as its __mro__.
    """
    if bases_function is None:
        bases_function = attrgetter("__bases__")
    if DEBUG:
        log.msg("mro of %s via %s" % (describe(obj), describe(bases_function)))
    return Linearizer().mro(obj, bases_function)
