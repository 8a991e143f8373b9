from . import env
from .writer import defcharset

__all__ = ["strsink", "bytesink", "funsink", "filesink"]

class strsink(object):
    __slots__ = ["fragments"]
    def __init__(self):
        self.fragments = []

    def write(self, text):
        self.fragments.append(text)

    def getvalue(self):
        ret = "".join(self.fragments)
        self.fragments[:] = [ret]
        return ret

    def __str__(self):
        return self.getvalue()

class bytesink(object):
    def __init__(self, fp, charset=None):
        self.fp = fp
        self.charset = env.current(defcharset, charset)

    def write(self, text):
        self.fp.write(text.encode(self.charset))

class funsink(object):
    __slots__ = ["fun"]
    def __init__(self, fun):
        self.fun = fun

    def write(self, text):
        self.fun(text)

class filesink(object):
    def __init__(self, path, append=False, charset=None):
        self.path = path
        self.charset = env.current(defcharset, charset)
        self.fp = open(path, "a" if append else "w", encoding=self.charset, newline="")

    def write(self, text):
        self.fp.write(text)

    def close(self):
        if self.fp is not None:
            self.fp.close()
            self.fp = None

    def __enter__(self):
        return self

    def __exit__(self, *excinfo):
        self.close()
        return False
