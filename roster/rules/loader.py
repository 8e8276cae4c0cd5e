import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from roster.rules.models import RosterRules

DEFAULT_RULES_PATH = "rules.yaml"
RULES_PATH_ENV = "ROSTER_RULES_PATH"


def default_rules() -> RosterRules:
    return RosterRules()


def resolve_rules_path(explicit: str | None = None) -> Path:
    """Pick the rules file: explicit argument, then env var, then default."""
    return Path(explicit or os.environ.get(RULES_PATH_ENV) or DEFAULT_RULES_PATH)


def load_rules(path: Path) -> RosterRules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        return RosterRules.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Rules validation failed:\n{e}") from e
