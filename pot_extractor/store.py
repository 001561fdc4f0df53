import copy
import os
import threading

from .message import PluralTranslation, Translation


def relative_to_cwd(path):
    """Make `path` relative to the working directory if it lies below it."""
    cwd = os.getcwd()
    absolute = os.path.abspath(path)
    try:
        if os.path.commonpath([cwd, absolute]) == cwd:
            return os.path.relpath(absolute, cwd)
    except ValueError:
        # different drives on Windows
        pass
    return path


def create_message(identity, file, line):
    reference = (relative_to_cwd(file), line)
    if type(identity) is tuple:
        msgid, msgid_plural = identity
        return PluralTranslation(msgid=msgid, msgid_plural=msgid_plural,
                                 references=[reference])
    return Translation(msgid=identity, references=[reference])


class _Bucket:
    """Messages of one (backend, domain) pair."""

    def __init__(self):
        self.lock = threading.Lock()
        self.messages = {}

    def add(self, identity, file, line):
        with self.lock:
            message = self.messages.get(identity)
            if message is None:
                self.messages[identity] = create_message(identity, file, line)
                return
            reference = (relative_to_cwd(file), line)
            if reference not in message.references:
                message.references.append(reference)


class ExtractionStore:
    """
    Accumulates the messages found during one scan.

    Safe to call `record` from several threads at once. Each
    (backend, domain) pair is guarded by its own lock, the registry lock
    is only held while looking up or creating a pair.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._buckets = {}
        self._backends = set()

    def add_backend(self, backend):
        """Register a backend even if none of its messages get recorded."""
        with self._lock:
            self._backends.add(backend)

    def _bucket(self, backend, domain):
        with self._lock:
            bucket = self._buckets.get((backend, domain))
            if bucket is None:
                bucket = self._buckets[(backend, domain)] = _Bucket()
            return bucket

    def record(self, backend, domain, identity, file, line):
        """
        Record one occurrence of a message.

        Parameters:
            backend (str): Name of the backend the message belongs to
            domain (str): Gettext domain
            identity: msgid, or a (msgid, msgid_plural) tuple
            file (str): Source file the message was found in
            line (int): Line number in the source file
        """
        self._bucket(backend, domain).add(identity, file, line)

    def all(self):
        """Return backend -> domain -> identity -> message."""
        with self._lock:
            buckets = list(self._buckets.items())
        result = {}
        for (backend, domain), bucket in buckets:
            with bucket.lock:
                messages = copy.deepcopy(bucket.messages)
            result.setdefault(backend, {})[domain] = messages
        return result

    def known_backends(self):
        with self._lock:
            return self._backends | {backend for backend, _ in self._buckets}
