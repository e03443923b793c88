"""Lookup sources supplying raw values by key."""

from .interfaces import LookupPort
from .sources import lookup_chain, lookup_from_dotenv, lookup_from_environ, lookup_from_mapping

__all__ = ["LookupPort", "lookup_chain", "lookup_from_dotenv", "lookup_from_environ", "lookup_from_mapping"]
