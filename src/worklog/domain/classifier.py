"""File category classification by extension."""

from typing import Mapping, Optional

MII = "mii"
WEB_APPLICATION = "web-application"
PROCEDURES = "procedures"
OTHER = "outros"

CATEGORIES = (MII, WEB_APPLICATION, PROCEDURES, OTHER)

_EXTENSION_CATEGORIES = {
    "trx": MII,
    "qry": MII,
    "js": WEB_APPLICATION,
    "ts": WEB_APPLICATION,
    "tsx": WEB_APPLICATION,
    "css": WEB_APPLICATION,
    "jsx": WEB_APPLICATION,
    "html": WEB_APPLICATION,
    "xml": WEB_APPLICATION,
    "json": WEB_APPLICATION,
    "irpt": WEB_APPLICATION,
    "sql": PROCEDURES,
}

_CATEGORY_NAMES = {
    MII: "MII",
    WEB_APPLICATION: "Web Application",
    PROCEDURES: "Procedures",
    OTHER: "Outros",
}

# Cell fills in the report workbook
_CATEGORY_COLORS = {
    MII: "FFE699",
    WEB_APPLICATION: "C6EFCE",
    PROCEDURES: "FFC7CE",
}
_DEFAULT_COLOR = "F8F9FA"


def extension_category(file_name: str) -> str:
    """Category derived from the file extension alone."""
    if "." not in file_name:
        return OTHER
    extension = file_name.rsplit(".", 1)[1].lower()
    return _EXTENSION_CATEGORIES.get(extension, OTHER)


def classify(file_name: str, overrides: Optional[Mapping[str, str]] = None) -> str:
    """Return the category for a file.

    A manual override for the file always wins, even when it contradicts
    the extension.

    Args:
        file_name: File name as listed in the day
        overrides: Optional file name to category overrides

    Returns:
        Category key
    """
    if overrides and file_name in overrides:
        return overrides[file_name]
    return extension_category(file_name)


def category_name(category: str) -> str:
    """Display name for a category key; unknown keys pass through."""
    return _CATEGORY_NAMES.get(category, category)


def category_color(category: str) -> str:
    """Fill color for a category key."""
    return _CATEGORY_COLORS.get(category, _DEFAULT_COLOR)
