import logging

from .config import pot_files_for_backends
from .errors import ExtractorError
from .pot_export import build_all_catalogs
from .reconcile import merge_pot_files
from .store import ExtractionStore


log = logging.getLogger(__name__)


class Extractor:
    """
    One extraction run.

    Call setup() before scanning, feed every message found to extract(),
    then ask pot_files() for the contents to write and call teardown().
    Also works as a context manager around the scan.
    """

    def __init__(self, backends):
        self.backends = list(backends)
        self._store = None

    def setup(self):
        if self._store is not None:
            raise ExtractorError("extraction already running")
        self._store = ExtractionStore()
        for backend in self.backends:
            self._store.add_backend(backend.name)

    def teardown(self):
        self._store = None

    @property
    def extracting(self):
        return self._store is not None

    def __enter__(self):
        self.setup()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.teardown()

    def extract(self, backend, domain, identity, file, line):
        """Scanner entry point, safe to call from several threads."""
        if self._store is None:
            raise ExtractorError("extract() called outside of a run")
        self._store.record(backend, domain, identity, file, line)

    def build_all_catalogs(self):
        if self._store is None:
            raise ExtractorError("no extraction is running")
        return build_all_catalogs(self._store.all(), self.backends)

    def pot_files(self, jobs=None):
        """
        Return a list of (path, contents) for every .pot file to write.

        Must only be called once the scan is complete.
        """
        po_structs = self.build_all_catalogs()
        known = self._store.known_backends()
        existing = pot_files_for_backends(
            [b for b in self.backends if b.name in known])
        log.info("%d existing .pot file(s), %d extracted catalog(s)",
                 len(existing), len(po_structs))
        return merge_pot_files(existing, po_structs, jobs=jobs)
