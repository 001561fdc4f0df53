from dataclasses import dataclass, field


TRANSLATOR = "translator"
EXTRACTED = "extracted"
FLAG = "flag"


@dataclass(frozen=True)
class Comment:
    kind: str
    text: str


@dataclass
class Translation:
    msgid: str
    msgstr: str = ""
    comments: list = field(default_factory=list)
    references: list = field(default_factory=list)


@dataclass
class PluralTranslation:
    msgid: str
    msgid_plural: str
    msgstr: dict = field(default_factory=lambda: {0: "", 1: ""})
    comments: list = field(default_factory=list)
    references: list = field(default_factory=list)


@dataclass
class Headers:
    """
    Header block of a catalog file, carried over untouched.

    Parameters:
        comment (str): Leading "#" comment lines above the header entry
        metadata (dict): Ordered "Name: value" pairs of the header entry
        fuzzy (bool): Whether the header entry is flagged as fuzzy
    """
    comment: str = ""
    metadata: dict = field(default_factory=dict)
    fuzzy: bool = False


@dataclass
class Catalog:
    headers: Headers = field(default_factory=Headers)
    translations: list = field(default_factory=list)


def key(message):
    if isinstance(message, PluralTranslation):
        return (message.msgid, message.msgid_plural)
    return (message.msgid,)


def is_blank(msgstr):
    if msgstr is None:
        return True
    if isinstance(msgstr, dict):
        return all(is_blank(s) for s in msgstr.values())
    return len(msgstr) == 0


def autogenerated(message):
    """
    A message is autogenerated when nobody has written a translator
    comment on it. Extracted comments and flags come from the tooling.
    """
    return not any(c.kind == TRANSLATOR for c in message.comments)
