"""Optional extension repositories shipped with pgdist."""

from .portal_corp import PortalCorp

__all__ = ["PortalCorp"]
