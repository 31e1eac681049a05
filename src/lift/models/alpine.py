"""The alpine-data root model and its baseline defaults."""

from typing import List, Optional

from pydantic import Field

from lift.models.base import LiftModel, MultiString
from lift.models.network import NetworkSettings
from lift.models.sshd import SSHD
from lift.models.system import (
    Disk,
    DRProvision,
    MTAConfiguration,
    PackagesConfig,
    User,
    WriteFile,
)


DEFAULT_HOSTNAME = "alpine"
DEFAULT_REPOSITORIES = [
    "http://dl-cdn.alpinelinux.org/alpine/v3.8/main",
    "http://dl-cdn.alpinelinux.org/alpine/v3.8/community",
]


class AlpineData(LiftModel):
    """Main alpine-data document."""
    root_password: str = Field(default="", alias="password")
    motd: str = ""
    network: Optional[NetworkSettings] = None
    packages: Optional[PackagesConfig] = None
    dr_provision: Optional[DRProvision] = None
    sshd: Optional[SSHD] = None
    groups: MultiString = Field(default_factory=list)
    users: List[User] = Field(default_factory=list)
    runcmd: List[MultiString] = Field(default_factory=list)
    write_files: List[WriteFile] = Field(default_factory=list)
    timezone: str = ""
    keymap: str = ""
    unlift: bool = Field(default=False, description="Disable lift after the first boot")
    scratch_disk: str = ""
    disks: List[Disk] = Field(default_factory=list)
    mta: Optional[MTAConfiguration] = None


def init_alpine_data() -> AlpineData:
    """Return alpine-data with sane defaults for a reachable, minimal host."""
    return AlpineData(
        unlift=True,
        timezone="UTC",
        keymap="us us",
        network=NetworkSettings(hostname=DEFAULT_HOSTNAME),
        sshd=SSHD(
            port=22,
            listen_address="0.0.0.0",
            permit_root_login=True,
            permit_empty_passwords=False,
            password_authentication=False,
        ),
        dr_provision=DRProvision(install_runner=True),
        packages=PackagesConfig(repositories=list(DEFAULT_REPOSITORIES)),
    )
