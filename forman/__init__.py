"""Forman — quoting and pricing for roofing contractors."""

__version__ = "0.1.0"
