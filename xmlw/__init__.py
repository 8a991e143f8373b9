__all__ = ["writer", "strsink", "bytesink", "funsink", "filesink", "xmlresp", "xmlapp",
           "xmlerror", "badhierarchy", "stackunderflow", "invalidcomment",
           "toofewroots", "toomanyroots", "nonwsroottext"]

from . import env
from .error import xmlerror, badhierarchy, stackunderflow, invalidcomment, toofewroots, toomanyroots, nonwsroottext
from .writer import writer, defcharset
from .sink import strsink, bytesink, funsink, filesink
from .resp import xmlresp, xmlapp
