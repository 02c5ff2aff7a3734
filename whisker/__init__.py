"""Typed indices, component handlers, logging, timing, checksums and other utilities for an entity-component-system runtime."""

__version__ = "0.1.0"