"""Data-source adapters.

An adapter is selected by its (protocol type, format type) pair only. The
parameters of both halves travel with it to the fetch/parse collaborators.
"""
from __future__ import annotations

from feedwire.adapters.catalog import list_formats, list_protocols
from feedwire.adapters.common import Adapter, DataFetcher, PayloadParser
from feedwire.adapters.dispatch import import_data, resolve
from feedwire.adapters.registry import AdapterRegistry, build_registry, default_registry

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "DataFetcher",
    "PayloadParser",
    "build_registry",
    "default_registry",
    "import_data",
    "list_formats",
    "list_protocols",
    "resolve",
]
