"""sshd_config rendering from the `sshd` section."""

import logging
import re
from typing import Dict, List

from lift.models.sshd import SSHD
from lift.utils.templates import render_template


logger = logging.getLogger(__name__)

SSHD_CONFIG_TEMPLATE = """# Managed by lift
{% for key, value in settings.items() -%}
{{ key }} {{ value }}
{% endfor %}
"""

# Matches `Port 22`, `#Port 22` and `Port=22`; `# Port is...` prose is left alone
_KEYWORD_RE = re.compile(r"^(?P<comment>#?)(?P<key>[A-Za-z]+)(\s|=)")


def render_sshd_config(sshd: SSHD) -> str:
    """Render a standalone sshd_config fragment."""
    return render_template(SSHD_CONFIG_TEMPLATE, settings=sshd.kv_map())


def apply_sshd_settings(existing: str, sshd: SSHD) -> str:
    """Rewrite sshd_config text so the managed keywords carry our values.

    The first occurrence of each keyword, commented out or not, is replaced
    in place. Later active occurrences are dropped since sshd honours the
    first one it reads. Keywords missing from the file are added before the
    first ``Match`` block, whose settings only apply conditionally.
    """
    settings = sshd.kv_map()
    keywords: Dict[str, str] = {key.lower(): key for key in settings}
    written = set()
    result: List[str] = []
    in_match = False

    for line in existing.splitlines():
        stripped = line.strip()
        match = _KEYWORD_RE.match(stripped)
        keyword = match.group("key").lower() if match else None

        if keyword == "match" and not match.group("comment") and not in_match:
            result.extend(_missing_lines(settings, written))
            in_match = True

        if in_match or keyword not in keywords:
            result.append(line)
            continue

        key = keywords[keyword]
        if key not in written:
            result.append(f"{key} {settings[key]}")
            written.add(key)
        elif match.group("comment"):
            result.append(line)
        else:
            logger.debug(f"Dropping duplicate sshd_config keyword: {stripped}")

    if not in_match:
        result.extend(_missing_lines(settings, written))

    return "\n".join(result) + "\n"


def _missing_lines(settings: Dict[str, str], written: set) -> List[str]:
    """Lines for keywords not yet written, in projection order."""
    lines = []
    for key, value in settings.items():
        if key not in written:
            lines.append(f"{key} {value}")
            written.add(key)
    return lines
