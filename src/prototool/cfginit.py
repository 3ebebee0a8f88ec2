"""Sample prototool.yaml generation."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError

from prototool.exceptions import TemplateExpansionError

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "prototool.yaml.j2"


def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        undefined=StrictUndefined,
        autoescape=False,
    )


_TEMPLATE: Template = _get_template_env().get_template(TEMPLATE_NAME)


@dataclass
class _TemplateData:
    # Prefix for every example setting: "#" comments them out.
    v: str
    protoc_version: str


def generate(protoc_version: str, uncomment: bool) -> bytes:
    """Generate the sample config file.

    Set uncomment to True to uncomment the example settings.
    """
    data = _TemplateData(v="" if uncomment else "#", protoc_version=protoc_version)
    try:
        rendered = _TEMPLATE.render(**asdict(data))
    except TemplateError as e:
        raise TemplateExpansionError(f"could not render {TEMPLATE_NAME}: {e}") from e
    logger.debug("rendered %s for protoc %s (uncomment=%s)", TEMPLATE_NAME, protoc_version, uncomment)
    return rendered.encode("utf-8")
