"""Registry adapter — host add submission."""

from cqbot.adapters.registry.client import HostRegistryClient, RegistryError

__all__ = ["HostRegistryClient", "RegistryError"]
