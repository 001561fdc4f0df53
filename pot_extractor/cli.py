'''
Update the .pot files of every configured backend from extraction records.

Examples:

    %(prog)s -c gettext.json -r records.jsonl
    %(prog)s -c gettext.json -r web.jsonl -r worker.jsonl --check

Each line of a records file is one message found by the source scanner:

    {"backend": "MyApp", "domain": "default", "msgid": "Hello",
     "file": "lib/my_app.ex", "line": 12}

Plural messages also carry "msgid_plural".
'''

import argparse
import json
import logging
import os
import sys

from logging.config import dictConfig

from .config import load_backends
from .errors import ConfigError, ExtractorError
from .extractor import Extractor


LOGGING_CONFIG = {
    'formatters': {
        'standard': {'format': '%(levelname)s %(funcName)s: %(message)s'},
    },
    'handlers': {
        'default': {
            'level': 'NOTSET',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'pot_extractor': {
            'handlers': ['default'],
            'level': 'WARNING',
        },
    },
    'disable_existing_loggers': False,
    'version': 1,
}

log = logging.getLogger(__name__)


def read_records(path):
    """Yield (backend, domain, identity, file, line) from a JSON Lines file."""
    try:
        with open(path, encoding="utf-8") as fp:
            for number, line in enumerate(fp, 1):
                if not line.strip():
                    continue
                yield parse_record(json.loads(line), path, number)
    except OSError as err:
        raise ConfigError(f"cannot read records {path}: {err}") from err
    except json.JSONDecodeError as err:
        raise ConfigError(f"{path}: invalid JSON: {err}") from err


def parse_record(record, path, number):
    if type(record) is not dict:
        raise ConfigError(f"{path}:{number}: expected an object")
    try:
        backend = record["backend"]
        domain = record["domain"]
        msgid = record["msgid"]
        file = record["file"]
        line = int(record["line"])
    except (KeyError, TypeError, ValueError) as err:
        raise ConfigError(f"{path}:{number}: invalid record: {err}") from err
    for field in ("backend", "domain", "msgid", "file"):
        if type(record[field]) is not str:
            raise ConfigError(
                f"{path}:{number}: \"{field}\" must be a string")
    if record.get("msgid_plural") is not None:
        if type(record["msgid_plural"]) is not str:
            raise ConfigError(
                f"{path}:{number}: \"msgid_plural\" must be a string")
        identity = (msgid, record["msgid_plural"])
    else:
        identity = msgid
    return (backend, domain, identity, file, line)


def is_up_to_date(path, contents):
    if not os.path.isfile(path):
        return False
    with open(path, "rb") as fp:
        return fp.read() == contents


def write_pot_files(pot_files, dry_run=False):
    """Write the files whose contents changed, return their paths."""
    changed = []
    for path, contents in pot_files:
        if is_up_to_date(path, contents):
            log.info("%s is up to date", path)
        else:
            changed.append((path, contents))
    if dry_run:
        return [path for path, _ in changed]
    for path, contents in changed:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "wb") as fp:
            fp.write(contents)
        log.info("wrote %s", path)
    return [path for path, _ in changed]


def main(argv=None):
    arg_parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    arg_parser.add_argument(
        '-c', '--config', dest='config', required=True,
        help='JSON file listing the backends and their priv directories')
    arg_parser.add_argument(
        '-r', '--records', dest='records', action='append', default=[],
        help='JSON Lines file of extracted messages, may be repeated')
    arg_parser.add_argument(
        '-j', '--jobs', dest='jobs', type=int, default=1,
        help='merge this many .pot files in parallel')
    arg_parser.add_argument(
        '--check', dest='check', action='store_true',
        help='write nothing and fail if any .pot file is out of date')
    arg_parser.add_argument(
        '--dry-run', dest='dry_run', action='store_true',
        help='only report which .pot files would change')
    arg_parser.add_argument(
        '--loglevel', dest='loglevel',
        choices=['INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help="set verbosity level")
    args = arg_parser.parse_args(argv)

    dictConfig(LOGGING_CONFIG)
    logging.getLogger('pot_extractor').setLevel(
        getattr(logging, args.loglevel))

    try:
        extractor = Extractor(load_backends(args.config))
        with extractor:
            for path in args.records:
                for record in read_records(path):
                    extractor.extract(*record)
            pot_files = extractor.pot_files(jobs=args.jobs)
        changed = write_pot_files(pot_files,
                                  dry_run=args.check or args.dry_run)
    except ExtractorError as err:
        log.error("%s", err)
        return 1
    except OSError as err:
        log.error("cannot write .pot files: %s", err)
        return 1

    for path in changed:
        print(path)
    if args.check and changed:
        log.error("%d .pot file(s) are out of date", len(changed))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
