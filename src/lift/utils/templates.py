"""Template rendering and document merging utilities."""

import logging
from typing import Any, Dict, Mapping

from jinja2 import Environment, TemplateError


logger = logging.getLogger(__name__)


def render_template(template_str: str, **context: Any) -> str:
    """Render a Jinja2 template string with given context."""
    try:
        return Environment().from_string(template_str).render(**context)
    except TemplateError as e:
        logger.error(f"Template rendering error: {e}")
        raise


def merge_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep merge two mappings.

    Nested mappings are merged key by key; any other value in ``override``,
    including lists and ``None``, replaces the value in ``base``.
    """
    result = dict(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result
