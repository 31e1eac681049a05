"""Users, packages, files, disks and the other host-level sections."""

from typing import List

from pydantic import Field

from lift.models.base import LiftModel, MultiString


class User(LiftModel):
    """An OS user to create."""
    name: str = ""
    gecos: str = Field(default="", description="User description")
    homedir: str = ""
    shell: str = ""
    no_create_homedir: bool = False
    primary_group: str = ""
    groups: MultiString = Field(default_factory=list)
    system: bool = False
    ssh_authorized_keys: List[str] = Field(default_factory=list)
    passwd: str = ""


class DRProvision(LiftModel):
    """Install and register the Digital Rebar runner (drpcli)."""
    install_runner: bool = False
    assets_url: str = ""
    token: str = ""
    endpoint: str = ""
    uuid: str = ""


class MTAConfiguration(LiftModel):
    """Mail forwarding through a relay server."""
    root: str = ""
    server: str = ""
    use_tls: bool = False
    use_starttls: bool = False
    user: str = ""
    password: str = ""
    authmethod: str = ""
    rewrite_domain: str = ""
    fromline_override: bool = False


class PackagesConfig(LiftModel):
    """The `packages` section."""
    repositories: MultiString = Field(default_factory=list)
    update: bool = False
    upgrade: bool = False
    install: MultiString = Field(default_factory=list)
    uninstall: MultiString = Field(default_factory=list)


class WriteFile(LiftModel):
    """A file created on first boot, either inline or fetched from a URL."""
    encoding: str = ""
    content: str = ""
    content_url: str = Field(default="", alias="content-url")
    path: str = ""
    owner: str = ""
    permissions: str = ""


class Disk(LiftModel):
    """A disk to format and mount (no partitioning, LUKS encrypted)."""
    device: str = ""
    filesystem: str = ""
    mountpoint: str = ""
