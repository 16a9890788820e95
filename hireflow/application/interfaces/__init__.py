# Interfaces Package
from .storage_port import HiringStorePort
from .notification_port import NotificationPort
from .identity_port import IdentityPort

__all__ = ["HiringStorePort", "NotificationPort", "IdentityPort"]
