"""Package manifest support for README-Conventions."""

from readme_conventions.plugins.pubspec import (
    PUBSPEC_FILE,
    README_FILE,
    PackageMetadata,
    RepositoryPackage,
    parse_pubspec,
)

__all__ = [
    "PUBSPEC_FILE",
    "README_FILE",
    "PackageMetadata",
    "RepositoryPackage",
    "parse_pubspec",
]
