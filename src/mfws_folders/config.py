"""Application configuration loaded from environment variables."""

import os
from dataclasses import dataclass

from mfws_folders.vault.paths import DEFAULT_ITEMS_RESOURCE, DEFAULT_VIEWS_RESOURCE

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class AppConfig:
    """Centralized application configuration.

    Every field has a default matching the stock MFWS deployment and can
    be overridden via environment variables.
    """

    views_resource: str = DEFAULT_VIEWS_RESOURCE
    items_resource: str = DEFAULT_ITEMS_RESOURCE
    sort_listings: bool = True


def load_config() -> AppConfig:
    """Construct an AppConfig from environment variables.

    Optional environment variables (with defaults):
        MF_VIEWS_RESOURCE: Path of the MFWS views resource (default: /REST/views/).
        MF_ITEMS_RESOURCE: Name of the folder items sub-resource (default: items).
        MF_SORT_LISTINGS: Whether listings are returned in folder-first order
            (default: true).

    Returns:
        Configured AppConfig instance.
    """
    views_resource = os.environ.get("MF_VIEWS_RESOURCE", DEFAULT_VIEWS_RESOURCE)
    if not views_resource.endswith("/"):
        views_resource = f"{views_resource}/"
    return AppConfig(
        views_resource=views_resource,
        items_resource=os.environ.get("MF_ITEMS_RESOURCE", DEFAULT_ITEMS_RESOURCE),
        sort_listings=os.environ.get("MF_SORT_LISTINGS", "true").strip().lower() in _TRUE_VALUES,
    )
