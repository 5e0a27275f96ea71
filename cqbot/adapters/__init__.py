"""Adapters — connector, registry and web implementations of the ports."""
