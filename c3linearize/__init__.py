"""
C3 linearization of dependency graphs with multiple inheritance
"""
from twisted.python import log # in case we change how we log

from c3linearize import exceptions
from c3linearize.cache import ILinearizationCache, LinearizationCache
from c3linearize.graph import build_graph, make_graph, sort_by_base_count
from c3linearize.merge import merge
from c3linearize.linearizer import Linearizer, mro

__all__ = ["log", "exceptions", "ILinearizationCache", "LinearizationCache",
        "build_graph", "make_graph", "sort_by_base_count", "merge", "Linearizer", "mro"]
