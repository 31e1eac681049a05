"""SSH daemon section model."""

from typing import Dict, List

from pydantic import Field

from lift.models.base import LiftModel


def bool_to_yes_no(value: bool) -> str:
    """Render a boolean the way sshd_config expects it."""
    return "yes" if value else "no"


class SSHD(LiftModel):
    """The `sshd` section."""
    port: int = 0
    listen_address: str = ""
    authorized_keys: List[str] = Field(default_factory=list)
    permit_root_login: bool = False
    permit_empty_passwords: bool = False
    password_authentication: bool = False

    def kv_map(self) -> Dict[str, str]:
        """Return the sshd_config keywords managed by this section."""
        return {
            "Port": str(self.port),
            "ListenAddress": self.listen_address,
            "PermitRootLogin": bool_to_yes_no(self.permit_root_login),
            "PermitEmptyPasswords": bool_to_yes_no(self.permit_empty_passwords),
            "PasswordAuthentication": bool_to_yes_no(self.password_authentication),
        }
