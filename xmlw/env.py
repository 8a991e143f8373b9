import threading, weakref

__all__ = ["environment", "root", "binding", "var", "current"]

class environment(object):
    __slots__ = ["parent", "map"]
    def __init__(self, parent=None):
        self.parent = parent
        self.map = weakref.WeakKeyDictionary()

    def get(self, var):
        if var in self.map:
            return self.map[var]
        if self.parent is None:
            return None
        return self.parent.get(var)

root = environment()

class context(threading.local):
    env = root
    saved = ()
context = context()

class binding(object):
    """Temporarily override configuration variables in the current
    thread, for the extent of a `with' block."""
    __slots__ = ["bindings"]
    def __init__(self, bindings):
        if isinstance(bindings, dict):
            bindings = list(bindings.items())
        self.bindings = bindings

    def __enter__(self):
        cur = context.env
        new = environment(cur)
        for var, val in self.bindings:
            new.map[var] = val
        context.saved = context.saved + (cur,)
        context.env = new
        return None

    def __exit__(self, *excinfo):
        if not context.saved:
            raise Exception("Unbalanced __enter__/__exit__")
        context.env = context.saved[-1]
        context.saved = context.saved[:-1]
        return False

class var(object):
    __slots__ = ["__weakref__"]
    def __init__(self, default=None):
        if default is not None:
            root.map[self] = default

    @property
    def val(self):
        return context.env.get(self)

    def binding(self, val):
        return binding([(self, val)])

def current(var, val=None):
    if val is not None:
        return val
    return var.val
