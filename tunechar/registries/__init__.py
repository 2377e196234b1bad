"""Registries: "add a family = register it" instead of if/else chains.

Built-in registrations live in :mod:`tunechar.registries.builtins` and are
imported lazily on first lookup.
"""
