__all__ = ["xmlerror", "badhierarchy", "stackunderflow", "invalidcomment",
           "toofewroots", "toomanyroots", "nonwsroottext"]

class xmlerror(Exception):
    pass

class badhierarchy(xmlerror):
    def __init__(self, op, kind):
        super().__init__("%s is not allowed inside %s" % (op, kind))
        self.op = op
        self.kind = kind

class stackunderflow(xmlerror):
    def __init__(self):
        super().__init__("No open context; the writer has been closed")

class invalidcomment(xmlerror):
    def __init__(self, text):
        super().__init__("Comment text would produce `--': %r" % (text,))
        self.text = text

class toofewroots(xmlerror):
    def __init__(self):
        super().__init__("Document has no root element")

class toomanyroots(xmlerror):
    def __init__(self, name):
        super().__init__("Document already has a root element; cannot start %r" % (name,))
        self.name = name

class nonwsroottext(xmlerror):
    def __init__(self, text):
        super().__init__("Only whitespace may appear outside the root element: %r" % (text,))
        self.text = text
