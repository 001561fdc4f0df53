import glob
import json
import os
from dataclasses import dataclass

from .errors import ConfigError


DEFAULT_PRIV = os.path.join("priv", "gettext")


@dataclass(frozen=True)
class Backend:
    name: str
    priv: str = DEFAULT_PRIV


def pot_path(backend, domain):
    return os.path.normpath(os.path.join(backend.priv, f"{domain}.pot"))


def pot_files_for_backends(backends):
    """Return every existing .pot file below the backends' priv dirs."""
    paths = set()
    for backend in backends:
        pattern = os.path.join(backend.priv, "**", "*.pot")
        for path in glob.glob(pattern, recursive=True):
            paths.add(os.path.normpath(path))
    return sorted(paths)


def load_backends(path):
    """
    Read backends from a JSON file shaped like

        {"backends": {"MyApp": {"priv": "priv/gettext"}}}

    A backend without "priv" uses the default directory. Relative priv
    directories are kept relative, they are resolved against the working
    directory like every other path.
    """
    try:
        with open(path, encoding="utf-8") as fp:
            config = json.load(fp)
    except OSError as err:
        raise ConfigError(f"cannot read config {path}: {err}") from err
    except json.JSONDecodeError as err:
        raise ConfigError(f"invalid JSON in config {path}: {err}") from err

    if type(config) is not dict or type(config.get("backends")) is not dict:
        raise ConfigError(f"{path}: expected a \"backends\" object")

    backends = []
    for name, options in sorted(config["backends"].items()):
        if options is None:
            options = {}
        if type(options) is not dict:
            raise ConfigError(f"{path}: backend \"{name}\" must be an object")
        priv = options.get("priv", DEFAULT_PRIV)
        if type(priv) is not str or not priv:
            raise ConfigError(f"{path}: backend \"{name}\" has invalid priv")
        backends.append(Backend(name=name, priv=priv))
    return backends
