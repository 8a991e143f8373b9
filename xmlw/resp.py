import structlog
from . import env, error, sink
from .writer import writer, defcharset

__all__ = ["xmlresp", "xmlapp", "defctype"]

log = structlog.get_logger(__name__)

defctype = env.var("text/xml")

xhtmlns = "http://www.w3.org/1999/xhtml"

def simpleerror(startreq, code, title, msg):
    buf = sink.strsink()
    with writer(buf, charset="utf-8") as w:
        with w.element("html", xmlns=xhtmlns):
            with w.element("head"):
                w.leaf("title", title)
            with w.element("body"):
                w.leaf("h1", title)
                w.leaf("p", msg)
    body = buf.getvalue().encode("utf-8")
    startreq("%i %s" % (code, title), [("Content-Type", "application/xhtml+xml; charset=utf-8"),
                                       ("Content-Length", str(len(body)))])
    return [body]

class xmlresp(object):
    """WSGI application calling `fun(environ, writer)' to produce its
    response. The XML is only sent once `fun' has returned and the
    writer has been closed without error; a writer error produces a
    500 response instead of partial output."""
    def __init__(self, fun, root="document", ctype=None, charset=None):
        self.fun = fun
        self.root = root
        self.ctype = ctype
        self.charset = charset

    def __call__(self, environ, startreq):
        charset = env.current(defcharset, self.charset)
        ctype = env.current(defctype, self.ctype)
        buf = sink.strsink()
        try:
            with writer(buf, root=self.root, charset=charset) as w:
                self.fun(environ, w)
        except error.xmlerror as exc:
            log.error("invalid XML response", path=environ.get("PATH_INFO"), error=str(exc))
            return simpleerror(startreq, 500, "Server Error", "The response could not be generated.")
        body = buf.getvalue().encode(charset)
        startreq("200 OK", [("Content-Type", "%s; charset=%s" % (ctype, charset)),
                            ("Content-Length", str(len(body)))])
        return [body]

def xmlapp(root="document", ctype=None):
    def dec(fun):
        ret = xmlresp(fun, root=root, ctype=ctype)
        ret.__wrapped__ = fun
        return ret
    return dec
