"""Extension repositories and installation."""

from .manager import get_available_extensions, install
from .model import AvailableExtension
from .registry import (
    RepositoryFactory,
    RepositoryNotFound,
    RepositoryRegistry,
    default_repositories,
)
from .repository import Repository, install_zip_bundle

__all__ = [
    "AvailableExtension",
    "Repository",
    "RepositoryFactory",
    "RepositoryNotFound",
    "RepositoryRegistry",
    "default_repositories",
    "get_available_extensions",
    "install",
    "install_zip_bundle",
]
