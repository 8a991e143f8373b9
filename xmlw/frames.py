from . import error

__all__ = ["frame", "fragment", "document", "element", "attribute",
           "comment", "procinst", "cdata"]

class frame(object):
    __slots__ = []
    kind = "frame"

    def enter(self, out):
        pass

    def exit(self, out):
        pass

    def __repr__(self):
        return "<%s frame>" % self.kind

class fragment(frame):
    __slots__ = []
    kind = "fragment"

class document(frame):
    __slots__ = ["charset", "roots"]
    kind = "document"

    def __init__(self, charset="utf-8"):
        self.charset = charset
        self.roots = 0

    def enter(self, out):
        out.write('<?xml version="1.0" encoding="' + self.charset + '" ?>')

    def exit(self, out):
        if self.roots < 1:
            raise error.toofewroots()

class element(frame):
    __slots__ = ["name", "empty"]
    kind = "element"

    def __init__(self, name):
        self.name = name
        self.empty = True

    def enter(self, out):
        out.write("<" + self.name)

    def closestart(self, out):
        if self.empty:
            out.write(">")
            self.empty = False

    def exit(self, out):
        if self.empty:
            out.write(" />")
        else:
            out.write("</" + self.name + ">")

    def __repr__(self):
        return "<element frame %r>" % (self.name,)

class attribute(frame):
    __slots__ = ["name"]
    kind = "attribute"

    def __init__(self, name):
        self.name = name

    def enter(self, out):
        out.write(" " + self.name + '="')

    def exit(self, out):
        out.write('"')

    def __repr__(self):
        return "<attribute frame %r>" % (self.name,)

class comment(frame):
    __slots__ = ["hyphen"]
    kind = "comment"

    def __init__(self):
        self.hyphen = False

    def enter(self, out):
        out.write("<!--")

    def exit(self, out):
        out.write("-->")

class procinst(frame):
    __slots__ = ["target"]
    kind = "processing instruction"

    def __init__(self, target):
        self.target = target

    def enter(self, out):
        out.write("<?" + self.target)

    def exit(self, out):
        out.write("?>")

    def __repr__(self):
        return "<processing instruction frame %r>" % (self.target,)

class cdata(frame):
    __slots__ = []
    kind = "CDATA section"

    def enter(self, out):
        out.write("<![CDATA[")

    def exit(self, out):
        out.write("]]>")
