# radial_menu/io/config.py
"""
Loading of the action document and the app config.

Both are YAML. Anything wrong with either (missing file, bad YAML, wrong
shape) is a ConfigError; the wheel never starts on a partial menu.
"""

import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from radial_menu.config.models import ActionModel, ActionsDocument, AppModel
from radial_menu.domain.entities.actions import ActionNode

DEFAULT_ACTIONS = Path(__file__).resolve().parent.parent / "data" / "default.yaml"


class ConfigError(ValueError):
    pass


def _read_yaml(path: str | os.PathLike):
    try:
        with open(path, encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"{path} is not valid YAML: {e}") from e


def to_node(m: ActionModel) -> ActionNode:
    children = [to_node(c) for c in m.subwheel] if m.subwheel else None
    return ActionNode(name=m.name, icon=m.icon, command=m.command, children=children)


def parse_actions(data) -> list[ActionNode]:
    """Validate an already-decoded document (a list of mappings) into the root level."""
    try:
        doc = ActionsDocument.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"malformed action document: {e}") from e
    return [to_node(m) for m in doc.root]


def loads_actions(text: str) -> list[ActionNode]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"action document is not valid YAML: {e}") from e
    return parse_actions(data)


def load_actions(path: str | os.PathLike | None = None) -> list[ActionNode]:
    return parse_actions(_read_yaml(path if path is not None else DEFAULT_ACTIONS))


def load_app_config(src: str | os.PathLike | Mapping | None = None) -> AppModel:
    if src is None:
        return AppModel()
    data = src if isinstance(src, Mapping) else (_read_yaml(src) or {})
    try:
        return AppModel.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"malformed app config: {e}") from e
