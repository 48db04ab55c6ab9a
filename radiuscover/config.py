"""Pydantic models defining configuration and result contracts for radiuscover."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class StopReason(str, Enum):
    DEADLINE = "deadline"
    TEMPERATURE_FLOOR = "temperature_floor"
    EMPTY_GRAPH = "empty_graph"


class RunStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


# ---------------------------------------------------------------------------
# Search configuration
# ---------------------------------------------------------------------------

class AnnealingConfig(BaseModel):
    """Schedule and stopping rule for the annealing search."""
    deadline_seconds: float = Field(
        default=26.0, gt=0, description="Wall-clock budget measured from run start",
    )
    initial_temperature: float = Field(default=3000.0, gt=0)
    cooling_rate: float = Field(
        default=0.9999, gt=0, lt=1,
        description="Multiplier applied once per feasible iteration",
    )
    min_temperature: float = Field(
        default=0.01, ge=0, description="Search stops once temperature drops to this",
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the shared random source; a clock reading when unset",
    )


class AnnealingStats(BaseModel):
    """Counters collected over one annealing run."""
    iterations: int = 0
    evaluated: int = Field(default=0, description="Iterations with a feasible neighbor")
    accepted: int = 0
    infeasible: int = 0
    improvements: int = 0
    greedy_size: int = 0
    best_size: int = 0
    best_energy_history: list[int] = Field(default_factory=list)
    final_temperature: float = 0.0
    elapsed_seconds: float = 0.0
    stop_reason: Optional[StopReason] = None


# ---------------------------------------------------------------------------
# Benchmark configuration models
# ---------------------------------------------------------------------------

class GeneratorConfig(BaseModel):
    """Configuration for a single instance generator."""
    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., description="Generator type, e.g. 'erdos_renyi'")
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra generator params (e.g. {'p': 0.3})",
        validation_alias=AliasChoices("params", "parameters"),
    )
    sizes: list[int] = Field(..., description="Graph sizes to generate")
    count_per_size: int = Field(default=1, ge=1, description="Instances per size")


class InstanceConfig(BaseModel):
    """Specifies which instances to generate."""
    generators: list[GeneratorConfig] = Field(default_factory=list)
    custom_instances: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Instances loaded from JSON files",
    )


class ExecutionConfig(BaseModel):
    """Repetition settings for benchmark runs."""
    runs_per_config: int = Field(default=1, ge=1)
    radii: list[int] = Field(default_factory=lambda: [1], min_length=1)
    track_memory: bool = Field(
        default=True,
        description="Trace peak memory with tracemalloc; slows deadline-bound searches",
    )


class BenchmarkConfig(BaseModel):
    """Top-level configuration for a benchmark sweep."""
    instance_config: InstanceConfig
    execution_config: ExecutionConfig = Field(default_factory=ExecutionConfig)
    annealing: AnnealingConfig = Field(default_factory=AnnealingConfig)


# ---------------------------------------------------------------------------
# Result record
# ---------------------------------------------------------------------------

class BenchmarkResult(BaseModel):
    """A single benchmark measurement (one algorithm × one instance × one radius × one run)."""
    algorithm_name: str
    instance_name: str
    instance_generator: str
    problem_size: int
    radius: int
    objective_value: Optional[int] = None
    lower_bound: int = 0
    optimum: Optional[int] = None
    gap: Optional[int] = Field(default=None, description="objective_value - optimum")
    wall_time_seconds: float = 0.0
    peak_memory_mb: float = 0.0
    status: RunStatus = RunStatus.SUCCESS
    run_index: int = 0
    feasible: bool = True
    error_message: str = ""
