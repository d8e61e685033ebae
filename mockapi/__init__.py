"""In-memory placeholder REST API (users, comments) used to exercise the clients.

Keeps the package importable and exposes __version__ when installed.
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("placeholder-taf")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
