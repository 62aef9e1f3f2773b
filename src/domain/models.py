from pydantic import BaseModel, Field, field_validator

from shared.constants import (
    DUMP_FILE_NAME,
    FILTER_SIZE,
    INITIAL_SCAN_POINTS,
    PRECOMPUTE_BUDGET_MS,
    SMALLEST_INCREMENT_DEG,
)


class ScannerSettings(BaseModel):
    """User-tunable scanner and precompute settings."""

    model_config = {
        'extra': 'ignore',  # tolerate keys from older settings files
    }

    # Target size of the coarse whole-sphere grid
    initial_scan_points: int = INITIAL_SCAN_POINTS
    # Candidates kept from the coarse grid (halved every refinement round)
    filter_size: int = FILTER_SIZE
    # Refinement stops at this latitude increment (degrees)
    smallest_increment_deg: float = SMALLEST_INCREMENT_DEG
    # Startup precompute budget (ms); negative means run to completion
    precompute_budget_ms: float = PRECOMPUTE_BUDGET_MS
    # Spend the startup budget at all
    precompute_on_startup: bool = True
    # File name of the peak dump
    dump_file_name: str = DUMP_FILE_NAME

    @field_validator('initial_scan_points', 'filter_size')
    @classmethod
    def validate_positive_count(cls, v: int | str) -> int:
        v = int(v)
        if v < 1:
            msg = 'Value must be at least 1'
            raise ValueError(msg)
        return v

    @field_validator('smallest_increment_deg')
    @classmethod
    def validate_increment(cls, v: float | str) -> float:
        v = float(v)
        if not (0.0 < v < 180.0):
            msg = 'Increment must be in the range (0, 180) degrees'
            raise ValueError(msg)
        return v

    @field_validator('dump_file_name')
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = 'File name must not be empty'
            raise ValueError(msg)
        return v


class HillDefinition(BaseModel):
    """Gaussian terrain feature of a catalog body."""

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    height: float
    width_deg: float = Field(gt=0.0)


class BodyDefinition(BaseModel):
    """One entry of a body catalog file."""

    model_config = {
        'extra': 'ignore',
    }

    name: str = Field(min_length=1)
    parent: str | None = None
    semi_major_axis: float | None = None
    home: bool = False
    solid_surface: bool = True
    base_altitude: float = 0.0
    hills: list[HillDefinition] = Field(default_factory=list)

    @field_validator('semi_major_axis')
    @classmethod
    def validate_sma(cls, v: float | None) -> float | None:
        if v is not None and v < 0:
            msg = 'Semi-major axis must not be negative'
            raise ValueError(msg)
        return v
