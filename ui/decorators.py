'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from functools import wraps

from core.log import Log

def check_read_only(method):
    """Decorator to skip a tree-editing method (returning None) while the owner is read-only."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        if self.is_read_only():
            Log.debug(f"Skipped {method.__name__}: read-only.", 2)
            return None
        return method(self, *args, **kwargs)
    return wrapper
