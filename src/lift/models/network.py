"""Network section models."""

from typing import Optional

from pydantic import Field

from lift.models.base import LiftModel, MultiString


class ResolvConfiguration(LiftModel):
    """DNS resolver settings written to resolv.conf."""
    nameservers: MultiString = Field(default_factory=list)
    search_domains: MultiString = Field(default_factory=list)
    domain: str = ""


class NTPConfiguration(LiftModel):
    """Time sources for chronyd."""
    pools: MultiString = Field(default_factory=list)
    servers: MultiString = Field(default_factory=list)


class NetworkSettings(LiftModel):
    """Network settings applied on first boot."""
    hostname: str = ""
    interfaces: str = Field(default="", description="Raw /etc/network/interfaces content")
    resolv_conf: Optional[ResolvConfiguration] = None
    proxy: str = ""
    ntp: Optional[NTPConfiguration] = None
