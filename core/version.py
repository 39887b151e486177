from importlib import metadata

try:
    __version__ = metadata.version("homequote")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    from homequote import __version__
