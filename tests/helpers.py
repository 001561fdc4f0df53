from pot_extractor.message import (TRANSLATOR, Catalog, Comment,
                                   PluralTranslation, Translation)


def singular(msgid, references=(), comments=(), msgstr=""):
    return Translation(msgid=msgid, msgstr=msgstr,
                       comments=list(comments), references=list(references))


def plural(msgid, msgid_plural, references=(), comments=(), msgstr=None):
    if msgstr is None:
        msgstr = {0: "", 1: ""}
    return PluralTranslation(msgid=msgid, msgid_plural=msgid_plural,
                             msgstr=msgstr,
                             comments=list(comments),
                             references=list(references))


def translator_comment(text):
    return Comment(TRANSLATOR, text)


def catalog(*translations, headers=None):
    if headers is None:
        return Catalog(translations=list(translations))
    return Catalog(headers=headers, translations=list(translations))


def write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return str(path)
