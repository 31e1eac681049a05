"""Pydantic models for alpine-data documents."""

from lift.models.alpine import AlpineData, init_alpine_data
from lift.models.base import LiftModel, MultiString
from lift.models.config import LiftOptions
from lift.models.network import NetworkSettings, NTPConfiguration, ResolvConfiguration
from lift.models.sshd import SSHD, bool_to_yes_no
from lift.models.system import (
    Disk,
    DRProvision,
    MTAConfiguration,
    PackagesConfig,
    User,
    WriteFile,
)

__all__ = [
    "AlpineData",
    "init_alpine_data",
    "LiftModel",
    "MultiString",
    "LiftOptions",
    "NetworkSettings",
    "NTPConfiguration",
    "ResolvConfiguration",
    "SSHD",
    "bool_to_yes_no",
    "Disk",
    "DRProvision",
    "MTAConfiguration",
    "PackagesConfig",
    "User",
    "WriteFile",
]
