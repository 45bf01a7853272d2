"""
The C3 merge.

merge() is the procedure from http://www.python.org/download/releases/2.3/mro/
(Samuele Pedroni, readability enhanced by Michele Simionato), generalized to
arbitrary sequences of keys and reporting the stuck sequences on failure.
"""

from collections import Counter, deque
from itertools import islice

from c3linearize import log
from c3linearize.util import DEBUG
from .exceptions import InconsistentHierarchyError

def merge(sequences):
    """
    Merge sequences of keys into one sequence which keeps the relative
    order of every input sequence.

    At each step the head of the first sequence whose head is not in
    the tail of any sequence is taken, and removed from the front of
    every sequence it heads. The inputs are not modified.
    """
    seqs = [deque(sequence) for sequence in sequences]

    # number of times each key appears after the head of a sequence
    in_tails = Counter()
    for sequence in seqs:
        in_tails.update(islice(sequence, 1, None))

    result = []
    while True:
        seqs = [sequence for sequence in seqs if sequence]
        if not seqs:
            return result

        for sequence in seqs: # find merge candidates among seq heads
            candidate = sequence[0]
            if not in_tails[candidate]:
                break
        else:
            raise InconsistentHierarchyError(seqs)

        if DEBUG:
            log.msg("merge: selected %r from %r" % (candidate, [list(s) for s in seqs]))
        result.append(candidate)
        for sequence in seqs: # remove candidate
            if sequence[0] == candidate:
                sequence.popleft()
                if sequence:
                    in_tails[sequence[0]] -= 1
