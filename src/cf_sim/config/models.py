from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    debug: bool = False
    record_events: bool = False  # write business events as JSONL to stderr


class GridModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    x_min: int = -10
    x_max: int = 10
    y_min: int = -10
    y_max: int = 10
    facility_count: int = Field(default=10, ge=0)
    facilities_per_node: int = Field(default=1, ge=1)
    id_width: int = Field(default=3, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.x_min > self.x_max:
            raise ValueError(f"x_min ({self.x_min}) must be <= x_max ({self.x_max})")
        if self.y_min > self.y_max:
            raise ValueError(f"y_min ({self.y_min}) must be <= y_max ({self.y_max})")
        return self


# ----------------- PLACEMENT ---------------------


class PlacementRejectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["rejection"] = "rejection"
    max_attempts_per_point: int = Field(default=100, ge=1)


class PlacementExhaustiveModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["exhaustive"] = "exhaustive"


PlacementUnion = Annotated[
    PlacementRejectionModel | PlacementExhaustiveModel, Field(discriminator="kind")
]

# ----------------- PRICING ---------------------


class PricingUniformModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["uniform"] = "uniform"
    max_price: float = 200.0

    @field_validator("max_price")
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


PricingUnion = Annotated[PricingUniformModel, Field(discriminator="kind")]

# ----------------- QUERIES ---------------------


class QueryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    closest: int = Field(default=3, ge=0)
    exit_word: str = "done"

    @field_validator("exit_word")
    @classmethod
    def _normalize(cls, v: str) -> str:
        v = v.replace(" ", "").lower()
        if not v:
            raise ValueError("exit_word must not be blank")
        if "," in v:
            raise ValueError("exit_word must not contain a comma")
        return v


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "default"
    run_id: str = "local"
    seed: int | None = None  # None => fresh OS entropy
    log: LogModel = LogModel()
    grid: GridModel = GridModel()
    placement: PlacementUnion = Field(default_factory=PlacementRejectionModel)
    pricing: PricingUnion = Field(default_factory=PricingUniformModel)
    query: QueryModel = QueryModel()
