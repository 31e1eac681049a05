"""
alpine-lift - first-boot provisioning data for minimal Alpine Linux hosts.

Declarative alpine-data documents (users, network, packages, sshd, mail
relay, disks, files) decoded into typed models seeded with safe defaults.
"""

__version__ = "1.0.0"

# Re-export key components for easier access
from lift.errors import DecodeError, LiftError
from lift.loader import DataLoader
from lift.models.alpine import AlpineData, init_alpine_data
from lift.models.base import MultiString

__all__ = [
    "AlpineData",
    "DataLoader",
    "DecodeError",
    "LiftError",
    "MultiString",
    "init_alpine_data",
]
