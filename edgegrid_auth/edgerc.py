"""
Loader for ``.edgerc`` credential files.

An ``.edgerc`` file is INI-like::

    [default]
    client_secret = xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx=
    host = akaa-baseurl-xxxxxxxxxxx-xxxxxxxxxxxxx.luna.akamaiapis.net
    access_token = akab-access-token-xxx-xxxxxxxxxxxxxxxx
    client_token = akab-client-token-xxx-xxxxxxxxxxxxxxxx
    max-body = 2048

Keys may be separated from values by ``=`` or ``:``.
"""

import configparser
import logging
import os
import stat
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_MAX_BODY, DEFAULT_SECTION, EDGERC_FILENAME, REQUIRED_EDGERC_KEYS
from .exceptions import ConfigException
from .request import Credentials

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgeRcCredentials(Credentials):
    """Credentials loaded from an .edgerc section, with their API host."""

    host: str
    max_body: int = DEFAULT_MAX_BODY


def resolve_path(path: Optional[str] = None) -> str:
    """
    Find the .edgerc file to read.

    An explicit path wins; otherwise ``$HOME/.edgerc`` if it exists, else
    ``.edgerc`` in the current directory.

    Raises:
        ConfigException: If the resolved file does not exist
    """
    if path:
        candidate = os.path.expanduser(path)
    else:
        candidate = os.path.join(os.path.expanduser('~'), EDGERC_FILENAME)
        if not os.path.isfile(candidate):
            candidate = os.path.join(os.getcwd(), EDGERC_FILENAME)

    if not os.path.isfile(candidate):
        raise ConfigException(f'Path to .edgerc file "{candidate}" does not exist!')
    return candidate


def _check_permissions(path: str):
    if not os.access(path, os.R_OK):
        raise ConfigException(f'Unable to read .edgerc file "{path}"!')
    if os.stat(path).st_mode & stat.S_IWOTH:
        raise ConfigException(
            f'Unable to read .edgerc file "{path}"! File is world-writable.'
        )


def _read(path: str) -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=('=', ':'),
        comment_prefixes=('#', ';'),
        interpolation=None,
        strict=False,
    )
    try:
        with open(path, encoding='utf-8') as fh:
            # indented lines would otherwise continue the previous value
            parser.read_file((line.strip() for line in fh), source=path)
    except PermissionError as e:
        raise ConfigException(f'Unable to read .edgerc file "{path}"!') from e
    except (configparser.Error, UnicodeDecodeError) as e:
        raise ConfigException(f'Unable to parse .edgerc file "{path}": {e}') from e
    return parser


def load(path: Optional[str] = None, section: Optional[str] = None) -> EdgeRcCredentials:
    """
    Load a credential section from an .edgerc file.

    Args:
        path: File to read; defaults to ``~/.edgerc`` then ``./.edgerc``
        section: Section name; defaults to ``default``

    Returns:
        The section's credentials, host and max body size

    Raises:
        ConfigException: If the file is missing, unreadable or malformed, or
            the section or one of its required keys is absent
    """
    section = section or DEFAULT_SECTION
    path = resolve_path(path)
    _check_permissions(path)

    logger.debug("Loading .edgerc section %r from %s", section, path)
    parser = _read(path)

    if not parser.has_section(section):
        raise ConfigException(f'Section "{section}" does not exist!')
    values = parser[section]

    for key in REQUIRED_EDGERC_KEYS:
        if not values.get(key):
            raise ConfigException(f'Section "{section}" is missing required key "{key}"')

    raw_max_body = values.get('max-body', values.get('max_body'))
    if raw_max_body is None or raw_max_body == '':
        max_body = DEFAULT_MAX_BODY
    else:
        try:
            max_body = int(raw_max_body)
        except ValueError:
            raise ConfigException(
                f'Invalid max-body value "{raw_max_body}" in section "{section}"'
            ) from None

    return EdgeRcCredentials(
        client_token=values['client_token'],
        client_secret=values['client_secret'],
        access_token=values['access_token'],
        host=values['host'],
        max_body=max_body,
    )
