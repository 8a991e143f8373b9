"""Streaming, validating XML writer.

A writer keeps a stack of frames describing the constructs that are
currently open. Every operation is looked up in the transition table
under the class of the topmost frame; the handler found there either
writes to the output directly, pushes a new frame (writing its opening
delimiter) or pops the top frame (writing its closing delimiter).
Anything not in the table is a hierarchy error. Output is never
buffered or retracted: whatever was written before an error stays
written.
"""

import contextlib
import structlog
from . import env, error, frames, util

__all__ = ["writer", "defcharset"]

log = structlog.get_logger(__name__)

defcharset = env.var("utf-8")

def push(stack, out, fr):
    fr.enter(out)
    stack.append(fr)

def pop(stack, out):
    if not stack:
        raise error.stackunderflow()
    fr = stack.pop()
    fr.exit(out)
    return fr

def content(handler):
    # The start tag of the enclosing element must be closed before
    # anything is written inside it.
    def wrapper(stack, out, top, arg):
        top.closestart(out)
        return handler(stack, out, top, arg)
    wrapper.__wrapped__ = handler
    return wrapper

def popself(stack, out, top, arg):
    pop(stack, out)

def newelement(stack, out, top, name):
    push(stack, out, frames.element(name))

def rootelement(stack, out, top, name):
    top.roots += 1
    if top.roots > 1:
        raise error.toomanyroots(name)
    push(stack, out, frames.element(name))

def newattr(stack, out, top, name):
    push(stack, out, frames.attribute(name))

def elementattr(stack, out, top, name):
    if not top.empty:
        raise error.badhierarchy("startattr", "element content")
    push(stack, out, frames.attribute(name))

def newcomment(stack, out, top, arg):
    push(stack, out, frames.comment())

def endcomment(stack, out, top, arg):
    if top.hyphen:
        raise error.invalidcomment("-")
    pop(stack, out)

def newpi(stack, out, top, target):
    push(stack, out, frames.procinst(target))

def newcdata(stack, out, top, arg):
    push(stack, out, frames.cdata())

def roottext(stack, out, top, text):
    if not util.iswhitespace(text):
        raise error.nonwsroottext(text)
    out.write(text)

def escapedtext(stack, out, top, text):
    out.write(util.escape(text))

def commenttext(stack, out, top, text):
    top.hyphen = util.checkcomment(text, top.hyphen)
    out.write(text)

def rawtext(stack, out, top, text):
    # Processing instruction data is neither escaped nor checked for `?>'.
    out.write(text)

def cdatatext(stack, out, top, text):
    out.write(util.splitcdata(text))

transitions = {
    (frames.fragment, "startelement"): newelement,
    (frames.fragment, "startcomment"): newcomment,
    (frames.fragment, "startpi"): newpi,
    (frames.fragment, "startcdata"): newcdata,

    (frames.document, "startelement"): rootelement,
    (frames.document, "startcomment"): newcomment,
    (frames.document, "startpi"): newpi,
    (frames.document, "text"): roottext,

    (frames.element, "startelement"): content(newelement),
    (frames.element, "endelement"): popself,
    (frames.element, "startattr"): elementattr,
    (frames.element, "startcomment"): content(newcomment),
    (frames.element, "startpi"): content(newpi),
    (frames.element, "startcdata"): content(newcdata),
    (frames.element, "text"): content(escapedtext),

    (frames.attribute, "endattr"): popself,
    (frames.attribute, "text"): escapedtext,

    (frames.comment, "endcomment"): endcomment,
    (frames.comment, "startpi"): newpi,
    (frames.comment, "text"): commenttext,

    (frames.procinst, "startattr"): newattr,
    (frames.procinst, "endpi"): popself,
    (frames.procinst, "text"): rawtext,

    (frames.cdata, "endcdata"): popself,
    (frames.cdata, "text"): cdatatext,
}

class writer(object):
    """Write XML to `out', which may be any object with a `write' method
    accepting strings.

    In "document" mode, the XML declaration is written at once and
    exactly one root element must be written before the writer is
    closed. In "fragment" mode, any number of top-level elements,
    comments, processing instructions and CDATA sections may be
    written, but no top-level text.
    """
    attrmap = {"klass": "class"}

    def __init__(self, out, root="document", charset=None):
        self.out = out
        self.stack = []
        if root == "document":
            push(self.stack, out, frames.document(env.current(defcharset, charset)))
        elif root == "fragment":
            push(self.stack, out, frames.fragment())
        else:
            raise ValueError("root must be `document' or `fragment', not %r" % (root,))
        log.debug("writer opened", root=root)

    @classmethod
    def document(cls, out, **kw):
        return cls(out, root="document", **kw)

    @classmethod
    def fragment(cls, out, **kw):
        return cls(out, root="fragment", **kw)

    @property
    def depth(self):
        return len(self.stack)

    @property
    def closed(self):
        return len(self.stack) == 0

    def top(self):
        if not self.stack:
            raise error.stackunderflow()
        return self.stack[-1]

    def dispatch(self, op, arg=None):
        top = self.top()
        handler = transitions.get((type(top), op))
        if handler is None:
            raise error.badhierarchy(op, top.kind)
        handler(self.stack, self.out, top, arg)

    def startelement(self, name):
        self.dispatch("startelement", name)

    def endelement(self):
        self.dispatch("endelement")

    def startattr(self, name):
        self.dispatch("startattr", name)

    def endattr(self):
        self.dispatch("endattr")

    def startcomment(self):
        self.dispatch("startcomment")

    def endcomment(self):
        self.dispatch("endcomment")

    def startpi(self, target):
        self.dispatch("startpi", target)

    def endpi(self):
        self.dispatch("endpi")

    def startcdata(self):
        self.dispatch("startcdata")

    def endcdata(self):
        self.dispatch("endcdata")

    def text(self, text):
        self.dispatch("text", text)

    def raw(self, text):
        self.out.write(text)

    def close(self):
        if not self.stack:
            return
        log.debug("closing writer", depth=len(self.stack))
        while self.stack:
            pop(self.stack, self.out)

    def __enter__(self):
        return self

    def __exit__(self, *excinfo):
        if excinfo[0] is None:
            self.close()
            return False
        try:
            self.close()
        except error.xmlerror as exc:
            log.warning("error while closing writer after failure", error=str(exc))
        return False

    def __del__(self):
        stack = getattr(self, "stack", None)
        if stack:
            log.warning("closing abandoned writer", depth=len(stack))
            try:
                self.close()
            except Exception:
                log.exception("could not close abandoned writer")

    def attrname(self, name):
        return self.attrmap.get(name, name)

    def attr(self, name, value):
        if value is None:
            return
        self.startattr(name)
        self.text(str(value))
        self.endattr()

    def leaf(self, name, text=None, **attrs):
        self.startelement(name)
        for k, v in attrs.items():
            self.attr(self.attrname(k), v)
        if text is not None:
            self.text(str(text))
        self.endelement()

    @contextlib.contextmanager
    def element(self, name, **attrs):
        self.startelement(name)
        for k, v in attrs.items():
            self.attr(self.attrname(k), v)
        yield self
        self.endelement()

    @contextlib.contextmanager
    def comment(self):
        self.startcomment()
        yield self
        self.endcomment()

    @contextlib.contextmanager
    def cdata(self):
        self.startcdata()
        yield self
        self.endcdata()

    @contextlib.contextmanager
    def pi(self, target):
        self.startpi(target)
        yield self
        self.endpi()
