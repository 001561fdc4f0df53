import copy
import logging

from .config import pot_path
from .errors import ConfigError
from .message import Catalog, key


log = logging.getLogger(__name__)


def _reference_order(reference):
    path, line = reference
    return (path, -1 if line is None else line)


def sort_references(message):
    message = copy.copy(message)
    message.references = sorted(set(message.references),
                                key=_reference_order)
    return message


def catalog_from_messages(messages):
    """
    Build a catalog out of freshly extracted messages.

    Both the messages and the references of each message are sorted so
    that extracting the same sources twice gives the same file.
    """
    translations = [sort_references(m) for m in sorted(messages, key=key)]
    return Catalog(translations=translations)


def build_all_catalogs(all_messages, backends):
    """
    Return a list of (path, catalog), one per extracted (backend, domain).

    Parameters:
        all_messages (dict): backend -> domain -> identity -> message,
            as returned by ExtractionStore.all()
        backends: Backend objects, looked up by name
    """
    by_name = {backend.name: backend for backend in backends}
    result = []
    for backend_name, domains in sorted(all_messages.items()):
        if backend_name not in by_name:
            raise ConfigError(f"unknown backend \"{backend_name}\"")
        backend = by_name[backend_name]
        for domain, messages in sorted(domains.items()):
            if not messages:
                continue
            catalog = catalog_from_messages(messages.values())
            path = pot_path(backend, domain)
            log.info("extracted %d message(s) for %s",
                     len(catalog.translations), path)
            result.append((path, catalog))
    return result
