"""Creational patterns: variations on how objects get constructed."""

from . import abstract_factory, factory_method, builder, prototype, singleton

__all__ = ["abstract_factory", "factory_method", "builder", "prototype", "singleton"]
