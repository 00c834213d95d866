"""GitHub releases catalog support."""

from .client import GITHUB_API_URL, GitHubClient, releases_api_url
from .models import Asset, Release

__all__ = [
    "GITHUB_API_URL",
    "GitHubClient",
    "releases_api_url",
    "Asset",
    "Release",
]
