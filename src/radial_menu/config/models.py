import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


class WheelModel(BaseModel):
    """Constants shared between the navigation engine and whoever draws it."""

    model_config = ConfigDict(extra="forbid")
    gesture_threshold: float = 50.0
    active_radius: float = 30.0
    bubble_radius: float = 20.0
    bubble_distance: float = 80.0
    canvas: tuple[float, float] | None = None  # (width, height) used while idle

    @field_validator("gesture_threshold", "active_radius", "bubble_radius", "bubble_distance")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if not v > 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


# ----------------- ACTION DOCUMENT ---------------------


class ActionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = Field(min_length=1)
    icon: str
    command: str | None = None
    subwheel: list["ActionModel"] | None = Field(default=None, min_length=1)


class ActionsDocument(RootModel[list[ActionModel]]):
    """Top level of an action document: a non-empty sequence of bubbles."""

    root: list[ActionModel] = Field(min_length=1)


# ----------------- RECORDER SINKS ---------------------


class SinkJsonlModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["jsonl"] = "jsonl"
    file: str | None = None  # None => stdout

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str | None) -> str | None:
        return os.path.expandvars(os.path.expanduser(v)) if v else v


class SinkMemoryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["memory"] = "memory"


SinkUnion = Annotated[SinkJsonlModel | SinkMemoryModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class AppModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "radial-menu"
    run_id: str = "local"
    actions_file: str | None = None  # None => bundled default document
    wheel: WheelModel = WheelModel()
    log: LogModel = LogModel()
    sinks: list[SinkUnion] = Field(default_factory=list)

    @field_validator("actions_file")
    @classmethod
    def _expand(cls, v: str | None) -> str | None:
        return os.path.expandvars(os.path.expanduser(v)) if v else v


ActionModel.model_rebuild()
