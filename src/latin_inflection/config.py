"""User configuration.

The configuration lives in ``$XDG_CONFIG_HOME/latin-inflection/config.toml``
(``~/.config/latin-inflection/config.toml`` when XDG_CONFIG_HOME is unset):

    case_order = "english"      # or "european" (default)
    database = "~/latin.db"

Environment variables
=====================

- LATIN_INFLECTION_DATABASE
    Path of the SQLite word store. Takes precedence over ``database``.

Anything missing or invalid falls back to the defaults, with a warning.
"""

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from latin_inflection.db.connection import DEFAULT_DB_PATH
from latin_inflection.enums import CaseOrder

logger = logging.getLogger(__name__)

APP_NAME = "latin-inflection"
CONFIG_FILENAME = "config.toml"
DATABASE_ENV_VAR = "LATIN_INFLECTION_DATABASE"


@dataclass
class Configuration:
    """Settings for the current session."""

    case_order: CaseOrder = CaseOrder.EUROPEAN
    database: Path = field(default_factory=lambda: DEFAULT_DB_PATH)


def get_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return the directory holding the configuration file.

    The directory is not created.
    """
    environ = os.environ if environ is None else environ

    base = environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    home = environ.get("HOME")
    if home:
        return Path(home) / ".config" / APP_NAME
    return Path.home() / ".config" / APP_NAME


def _read_config_file(path: Path) -> dict[str, object]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring configuration file %s: %s", path, e)
        return {}


def load_configuration(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> Configuration:
    """Read the configuration, assuming defaults for anything that goes wrong.

    Args:
        path: Configuration file to read (default: config.toml under
            `get_config_path`)
        environ: Environment to use instead of os.environ

    Returns:
        Configuration for the session
    """
    environ = os.environ if environ is None else environ
    path = path or get_config_path(environ) / CONFIG_FILENAME

    raw = _read_config_file(path)
    config = Configuration()

    order = raw.get("case_order")
    if order is not None:
        try:
            config.case_order = CaseOrder(order)
        except ValueError:
            logger.warning(
                "Unknown case order %r in %s, using '%s'", order, path, config.case_order
            )

    database = raw.get("database")
    if database is not None:
        if isinstance(database, str) and database:
            config.database = Path(database).expanduser()
        else:
            logger.warning("Invalid database path %r in %s, ignoring it", database, path)

    override = environ.get(DATABASE_ENV_VAR)
    if override:
        config.database = Path(override).expanduser()

    return config
