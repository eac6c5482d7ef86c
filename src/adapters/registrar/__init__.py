"""Registrar adapters - Implementations of the AccountRegistrar port."""

from .noop import NoopAccountRegistrar

__all__ = ["NoopAccountRegistrar"]
