# Configuration helpers and metadata
#
# Settings live in a ConfigParser loaded from the packaged gloss.ini
# and then the user's ~/.gloss, so user values override the system
# defaults. Modules read settings through the typed getters below,
# which fall back to a default when a section or option is missing
# or cannot be parsed.

import configparser
import logging
import os
import sys

from .Picture import color_from_string

__all__ = [
    # Metadata
    "__version__", "__prg__", "__title__",
    # Paths
    "prgpath", "iniSystem", "iniUser",
    # Globals
    "config",
    # Functions
    "loadConfiguration", "addSection",
    "getStr", "getInt", "getFloat", "getBool", "getColor",
    "setStr", "setBool",
]

__version__ = "0.1.0"
__prg__ = "gloss"

__platform_fingerprint__ = "({} py{}.{}.{})".format(
    sys.platform,
    sys.version_info.major,
    sys.version_info.minor,
    sys.version_info.micro,
)
__title__ = f"{__prg__} {__version__} {__platform_fingerprint__}"

prgpath = os.path.abspath(os.path.dirname(__file__))
iniSystem = os.path.join(prgpath, f"{__prg__}.ini")
iniUser = os.path.expanduser(f"~/.{__prg__}")

config = configparser.ConfigParser(interpolation=None)


# -----------------------------------------------------------------------------
# Load configuration
# -----------------------------------------------------------------------------
def loadConfiguration(systemOnly=False):
    """(Re)load settings, replacing whatever is in config.

    Returns:
        List of files that were read.
    """
    config.clear()
    if systemOnly:
        read = config.read(iniSystem)
    else:
        read = config.read([iniSystem, iniUser])
    logging.debug("Loaded configuration from %s", read)
    return read


# -----------------------------------------------------------------------------
# add section if it doesn't exist
# -----------------------------------------------------------------------------
def addSection(section):
    if not config.has_section(section):
        config.add_section(section)


# -----------------------------------------------------------------------------
def getStr(section, name, default=""):
    try:
        return config.get(section, name)
    except Exception:
        return default


# -----------------------------------------------------------------------------
def getInt(section, name, default=0):
    try:
        return int(config.get(section, name))
    except Exception:
        return default


# -----------------------------------------------------------------------------
def getFloat(section, name, default=0.0):
    try:
        return float(config.get(section, name))
    except Exception:
        return default


# -----------------------------------------------------------------------------
def getBool(section, name, default=False):
    try:
        return bool(int(config.get(section, name)))
    except Exception:
        return default


# -----------------------------------------------------------------------------
def getColor(section, name, default):
    """Color option parsed with color_from_string, or default."""
    try:
        return color_from_string(config.get(section, name))
    except Exception:
        logging.debug("Invalid or missing color %s.%s, using default",
                      section, name)
        return default


# -----------------------------------------------------------------------------
def setBool(section, name, value):
    addSection(section)
    config.set(section, name, str(int(value)))


# -----------------------------------------------------------------------------
def setStr(section, name, value):
    addSection(section)
    config.set(section, name, str(value))

