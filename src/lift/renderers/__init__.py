"""Text views derived from alpine-data sections."""

from lift.renderers.sshd import apply_sshd_settings, render_sshd_config

__all__ = [
    "apply_sshd_settings",
    "render_sshd_config",
]
