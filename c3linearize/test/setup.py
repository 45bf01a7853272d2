"""
Send twisted's log to the test run's stdout; import to activate
"""

import sys

from twisted.python import log

class CapturedStdout(object):
    """
    Looks sys.stdout up on every write, since py.test swaps it per test
    """
    def write(self, msg):
        sys.stdout.write(msg)

    def flush(self):
        sys.stdout.flush()

log.startLogging(CapturedStdout(), setStdout=False)
