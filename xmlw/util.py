from . import error

__all__ = ["escape", "iswhitespace", "checkcomment", "splitcdata"]

entities = str.maketrans({"<": "&lt;",
                          "&": "&amp;",
                          ">": "&gt;",
                          "'": "&apos;",
                          '"': "&quot;"})

def escape(text):
    return text.translate(entities)

xmlspace = frozenset(" \t\n\r")

def iswhitespace(text):
    for c in text:
        if c not in xmlspace:
            return False
    return True

def checkcomment(text, hyphen):
    """Check one piece of comment text against what has already been
    written to the same comment, where `hyphen' tells whether that ended
    with a hyphen. Returns the value of `hyphen' to use for the next
    piece."""
    if text == "":
        return hyphen
    if hyphen and text[0] == "-":
        raise error.invalidcomment(text)
    if "--" in text:
        raise error.invalidcomment(text)
    return text[-1] == "-"

def splitcdata(text):
    # Terminators split over several writes are not caught.
    return text.replace("]]>", "]]]]><![CDATA[>")
