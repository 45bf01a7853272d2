"""
Small helpers shared by the rest of the package.
"""

import os

from twisted.python.reflect import fullyQualifiedName

DEBUG = "C3LINEARIZE_DEBUG" in os.environ

class ExceptionWithMessage(Exception):
    """
    Subclass this class and provide a docstring; the docstring will be
    formatted with the __init__ args and then used as the error

    (every c3linearize error with a formatted message is one of these)
    """
    def __init__(self, *args, **kwargs):
        assert self.__class__ != ExceptionWithMessage
        Exception.__init__(self, self.__class__.__doc__.format(*args, **kwargs))

def describe(obj):
    """
    Name something for a log message: the fully qualified name for
    functions, classes and modules, the repr for anything else
    """
    try:
        return fullyQualifiedName(obj)
    except AttributeError:
        return repr(obj)
