import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from testing_lab.rules.models import LabRules

logger = logging.getLogger(__name__)


class RulesError(ValueError):
    """Rules file could not be parsed or failed schema validation."""

    pass


def _strip_code_fence(content: str) -> str:
    # Rules may be embedded in markdown as a ```yaml block
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def parse_rules(content: str) -> LabRules:
    """
    Parse and validate rules text.
    Raises RulesError if the YAML or the schema is invalid.
    """
    try:
        data = yaml.safe_load(_strip_code_fence(content))
    except yaml.YAMLError as e:
        raise RulesError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return LabRules.model_validate(data)
    except ValidationError as e:
        raise RulesError(f"Rules validation failed:\n{e}") from e


def load_rules(path: Path) -> LabRules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises RulesError if schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    rules = parse_rules(content)
    logger.debug(f"Loaded rules {rules.project.slug} v{rules.project.rules_version} from {path}")
    return rules
