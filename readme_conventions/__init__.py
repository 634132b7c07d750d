"""README-Conventions: README convention checks for Flutter plugin monorepos."""

__version__ = "0.1.0"
