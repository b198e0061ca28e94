from .config_loader import ConfigLoader, load_site_config, parse_site_config
from .schemas import CONTACT_PLATFORMS, Author, Contacts, MenuItem, SiteConfig

# The record is loaded lazily through ConfigLoader.load_config() so that
# importing the package never fails on a missing or invalid data file.

__all__ = [
    "CONTACT_PLATFORMS",
    "Author",
    "ConfigLoader",
    "Contacts",
    "MenuItem",
    "SiteConfig",
    "load_site_config",
    "parse_site_config",
]
