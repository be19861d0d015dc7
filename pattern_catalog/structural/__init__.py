"""Structural patterns: variations on how objects are composed."""

from . import adapter, bridge, composite, decorator, facade, flyweight, proxy

__all__ = ["adapter", "bridge", "composite", "decorator", "facade", "flyweight", "proxy"]
