from .delegates import DelegatesClient as DelegatesClient
from .resources import ResourcesClient as ResourcesClient

__all__ = [
    "DelegatesClient",
    "ResourcesClient",
]
