"""
Tunable thresholds for the heuristic parser.

Defaults live in the ParserSettings dataclass. A YAML override can be merged
on top, either passed explicitly or found through CURRICULO_PARSER_CONFIG:

    # parser.yaml
    header_max_length: 70
    language_tie_margin: 0
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from curriculo.contexts.parsing.exceptions import ParserConfigError

load_dotenv()
PARSER_CONFIG_ENV = "CURRICULO_PARSER_CONFIG"


@dataclass(frozen=True)
class ParserSettings:
    """
    Length limits and tolerances used by the classifier and extractors.

    Attributes:
        header_max_length: Longest line still considered a section header
        project_title_max_length: Project lines shorter than this start a new project
        organization_backfill_max_length: Max length of a line used to backfill company/institution
        name_max_length: Name line must be shorter than this
        location_max_length: Location line must be shorter than this
        min_skill_length: Skill items shorter than this are dropped
        language_tie_margin: Max score gap for which pt/en is reported as "mixed"
    """

    header_max_length: int = 60
    project_title_max_length: int = 50
    organization_backfill_max_length: int = 50
    name_max_length: int = 40
    location_max_length: int = 50
    min_skill_length: int = 2
    language_tie_margin: int = 1


def load_parser_settings(config_path: Optional[Path] = None) -> ParserSettings:
    """
    Load parser settings, merging a YAML override over the defaults.

    Args:
        config_path: YAML file to merge (defaults to $CURRICULO_PARSER_CONFIG, if set)

    Returns:
        ParserSettings with overrides applied

    Raises:
        ParserConfigError: If the file is missing, unreadable, or does not fit the schema
    """
    if config_path is None:
        env_path = os.getenv(PARSER_CONFIG_ENV)
        if not env_path:
            return ParserSettings()
        config_path = Path(env_path)

    config_path = Path(config_path)
    if not config_path.exists():
        raise ParserConfigError("Parser config file not found", config_path=config_path)

    try:
        base = OmegaConf.structured(ParserSettings)
        # Frozen dataclasses produce read-only configs
        OmegaConf.set_readonly(base, False)
        override = OmegaConf.load(config_path)
        merged = OmegaConf.merge(base, override)
        return ParserSettings(**OmegaConf.to_container(merged))
    except (OmegaConfBaseException, ValueError, TypeError) as exc:
        raise ParserConfigError(
            "Parser config does not match ParserSettings", config_path=config_path, original_error=exc
        ) from exc
