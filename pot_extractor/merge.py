import dataclasses
import logging

from .errors import NonEmptyTemplateTranslation
from .message import Catalog, autogenerated, is_blank, key


log = logging.getLogger(__name__)


def ensure_empty_msgstr(message):
    if not is_blank(message.msgstr):
        raise NonEmptyTemplateTranslation(message)


def merge_translations(old, new):
    """
    Keep what translators wrote on `old` and take the references of `new`.
    """
    ensure_empty_msgstr(old)
    ensure_empty_msgstr(new)
    return dataclasses.replace(old,
                               comments=list(old.comments),
                               references=list(new.references))


def merge_template(existing, new):
    """
    Merge the catalog of an existing .pot file with a freshly built one.

    Messages of `existing` keep their order. Those that were extracted
    again get their references refreshed, those that were not are
    dropped unless somebody commented them by hand. Messages only found
    in `new` are appended. The headers of `existing` are kept.
    """
    new_by_key = {key(m): m for m in new.translations}
    existing_keys = set()
    old_and_merged = []
    purged = 0

    for message in existing.translations:
        existing_keys.add(key(message))
        same = new_by_key.get(key(message))
        if same is not None:
            old_and_merged.append(merge_translations(message, same))
        elif autogenerated(message):
            purged += 1
        else:
            old_and_merged.append(message)

    unique_new = [m for m in new.translations
                  if key(m) not in existing_keys]

    log.debug("kept %d, purged %d, added %d message(s)",
              len(old_and_merged), purged, len(unique_new))
    return Catalog(headers=existing.headers,
                   translations=old_and_merged + unique_new)
