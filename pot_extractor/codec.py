"""Conversion between catalogs and .pot text, on top of polib."""

import logging
import os

import polib

from .errors import MalformedCatalogFile
from .message import (EXTRACTED, FLAG, TRANSLATOR, Catalog, Comment, Headers,
                      PluralTranslation, Translation, key)


WRAPWIDTH = 78

log = logging.getLogger(__name__)


def _split_comment(kind, text):
    if not text:
        return []
    return [Comment(kind, line) for line in text.split("\n")]


def _join_comments(comments, kind):
    return "\n".join(c.text for c in comments if c.kind == kind)


def _line_number(line):
    return int(line) if line else None


def message_from_entry(entry):
    comments = _split_comment(TRANSLATOR, entry.tcomment) + \
        _split_comment(EXTRACTED, entry.comment) + \
        [Comment(FLAG, flag) for flag in entry.flags]
    references = [(path, _line_number(line))
                  for path, line in entry.occurrences]
    if entry.msgid_plural:
        msgstr = {int(n): s for n, s in entry.msgstr_plural.items()}
        return PluralTranslation(msgid=entry.msgid,
                                 msgid_plural=entry.msgid_plural,
                                 msgstr=msgstr,
                                 comments=comments,
                                 references=references)
    return Translation(msgid=entry.msgid, msgstr=entry.msgstr,
                       comments=comments, references=references)


def entry_from_message(message):
    kwargs = {
        "msgid": message.msgid,
        "tcomment": _join_comments(message.comments, TRANSLATOR),
        "comment": _join_comments(message.comments, EXTRACTED),
        "flags": [c.text for c in message.comments if c.kind == FLAG],
        "occurrences": [(path, "" if line is None else str(line))
                        for path, line in message.references],
    }
    if isinstance(message, PluralTranslation):
        kwargs["msgid_plural"] = message.msgid_plural
        kwargs["msgstr_plural"] = {n: s or "" for n, s
                                   in sorted(message.msgstr.items())}
    else:
        kwargs["msgstr"] = message.msgstr or ""
    return polib.POEntry(**kwargs)


def catalog_from_pofile(pofile, origin="<string>"):
    translations = []
    seen = set()
    for entry in pofile:
        if entry.obsolete:
            continue
        if entry.msgctxt is not None:
            log.warning("%s: dropping msgctxt '%s' of msgid '%s'",
                        origin, entry.msgctxt, entry.msgid)
        if entry.previous_msgid or entry.previous_msgctxt:
            log.warning("%s: dropping previous msgid of msgid '%s'",
                        origin, entry.msgid)
        message = message_from_entry(entry)
        if key(message) in seen:
            raise MalformedCatalogFile(
                origin, f"duplicate msgid '{message.msgid}'")
        seen.add(key(message))
        translations.append(message)
    headers = Headers(comment=pofile.header or "",
                      metadata=dict(pofile.metadata),
                      fuzzy=bool(pofile.metadata_is_fuzzy))
    return Catalog(headers=headers, translations=translations)


def parse(path):
    """Read the catalog stored at `path`."""
    if not os.path.isfile(path):
        raise MalformedCatalogFile(path, "no such file")
    try:
        pofile = polib.pofile(path, wrapwidth=WRAPWIDTH)
    except (OSError, ValueError) as err:
        raise MalformedCatalogFile(path, str(err)) from err
    log.debug("parsed %s (%d entries)", path, len(pofile))
    return catalog_from_pofile(pofile, path)


def parse_string(text):
    # polib.pofile treats any string that is not an existing path as data
    try:
        pofile = polib.pofile(text, wrapwidth=WRAPWIDTH)
    except (OSError, ValueError) as err:
        raise MalformedCatalogFile("<string>", str(err)) from err
    return catalog_from_pofile(pofile)


def to_pofile(catalog):
    pofile = polib.POFile(wrapwidth=WRAPWIDTH)
    pofile.header = catalog.headers.comment
    pofile.metadata = dict(catalog.headers.metadata)
    pofile.metadata_is_fuzzy = catalog.headers.fuzzy
    for message in catalog.translations:
        pofile.append(entry_from_message(message))
    return pofile


def dumps(catalog):
    return str(to_pofile(catalog))


def serialize(catalog):
    return dumps(catalog).encode("utf-8")
