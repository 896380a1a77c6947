"""template-cli: create projects from predefined repository templates."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("template-cli")
except PackageNotFoundError:
    __version__ = "0.0.0"
