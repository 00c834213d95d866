"""Portal Corp precompiled extension bundles."""

from .catalog import URL, PortalCorpCatalog, matcher
from .repository import PortalCorp

__all__ = ["URL", "PortalCorp", "PortalCorpCatalog", "matcher"]
