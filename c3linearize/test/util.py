class Counter(object):
    """
    a mutable counter; used for testing how often callbacks got called
    """
    def __init__(self):
        self.count = 0

    def tick(self):
        "Increment the counter by 1"
        self.count += 1

def counting(bases, counter):
    "bases function reading a dict of key -> bases, ticking counter on every call"
    def bases_of(key):
        counter.tick()
        return bases[key]
    return bases_of

def should_never_run(): # pragma: no cover
    assert False, "this should never run"
