import logging
import os
from concurrent.futures import ThreadPoolExecutor

from . import codec
from .errors import ConfigError, NonEmptyTemplateTranslation
from .merge import merge_template
from .message import Catalog


log = logging.getLogger(__name__)


def merge_existing_and_extracted(path, extracted):
    """
    Merge the .pot file at `path` with `extracted`. Passing None purges
    the file of every message that was not added by hand.
    """
    existing = codec.parse(path)
    if extracted is None:
        log.info("purging %s", path)
        extracted = Catalog()
    else:
        log.info("merging %s", path)
    try:
        return merge_template(existing, extracted)
    except NonEmptyTemplateTranslation as err:
        err.path = path
        raise


def _reconcile_one(item):
    path, (exists, extracted) = item
    if exists:
        catalog = merge_existing_and_extracted(path, extracted)
    else:
        log.info("creating %s", path)
        catalog = extracted
    return (path, codec.serialize(catalog))


def merge_pot_files(pot_files, po_structs, jobs=None):
    """
    Return a list of (path, contents) to be written to disk.

    Parameters:
        pot_files: Paths of the existing .pot files
        po_structs: (path, catalog) pairs built from the extraction
        jobs (int): Merge this many files in parallel

    Files that exist and were extracted again are merged, files that
    exist but got no extracted message are purged, and files that do
    not exist yet are created. The result is sorted by path.
    """
    # path -> [exists on disk, extracted catalog or None]
    pending = {os.path.normpath(path): [True, None] for path in pot_files}
    for path, catalog in po_structs:
        entry = pending.setdefault(os.path.normpath(path), [False, None])
        if entry[1] is not None:
            raise ConfigError(f"{path} was extracted more than once")
        entry[1] = catalog
    items = sorted(pending.items())

    if jobs and jobs > 1 and len(items) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            # map() yields in submission order and re-raises the first error
            return list(executor.map(_reconcile_one, items))
    return [_reconcile_one(item) for item in items]
