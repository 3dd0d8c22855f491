# parsers/config.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from .events import Preset
from .models import SectionKind

logger = logging.getLogger(__name__)

DEFAULT_SECTIONS: dict[str, SectionKind] = {
    "Parameters": SectionKind.PARAMETERS,
    "Returns": SectionKind.RETURNS,
    "Examples": SectionKind.EXAMPLES,
}


class ParserConfig(BaseModel):
    """Configuration for docblock parsing.

    ``sections`` maps exact heading labels to recognized section kinds.
    Headings not listed here become custom sections.
    """

    sections: dict[str, SectionKind] = Field(
        default_factory=lambda: dict(DEFAULT_SECTIONS)
    )
    preset: Preset = "commonmark"

    class Config:
        extra = "forbid"
        frozen = True


def load_config(path: str | Path) -> ParserConfig:
    logger.info("Loading parser config from: %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    config = ParserConfig(**data)
    logger.debug("Loaded %d section labels", len(config.sections))
    return config
