"""
Data model for one damage analysis.

All entities are transient: built from one request, consumed once, never
persisted by the engine. Inputs are immutable and validated on construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

from seismo_damage.analysis_engine.tables import MaterialType, SoilType
from seismo_damage.core.exceptions import InvalidInputError
from seismo_damage.utils.rounding import round_int


def _coerce_float(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or value is None:
        raise InvalidInputError(f"{field_name} must be a number", field=field_name)
    if isinstance(value, (int, float)):
        out = float(value)
    elif isinstance(value, str):
        try:
            out = float(value.strip())
        except ValueError:
            raise InvalidInputError(f"{field_name} must be a number, got {value!r}", field=field_name) from None
    else:
        raise InvalidInputError(f"{field_name} must be a number", field=field_name)
    if not math.isfinite(out):
        raise InvalidInputError(f"{field_name} must be finite", field=field_name)
    return out


def _coerce_floor_count(value: Any) -> int:
    if isinstance(value, bool) or value is None:
        raise InvalidInputError("floor_count must be a positive integer", field="floor_count")
    if isinstance(value, int):
        out = value
    elif isinstance(value, float) and value.is_integer():
        out = int(value)
    elif isinstance(value, str) and value.strip().lstrip("+").isdigit():
        out = int(value.strip())
    else:
        raise InvalidInputError(f"floor_count must be a positive integer, got {value!r}", field="floor_count")
    if out < 1:
        raise InvalidInputError("floor_count must be >= 1", field="floor_count")
    return out


@dataclass(frozen=True)
class AnalysisInput:
    """
    Immutable analysis inputs.

    Soil and material accept raw strings (case-insensitive); anything
    unrecognized becomes UNKNOWN and uses the default weights. Numeric
    fields are validated and raise InvalidInputError instead of defaulting.
    """

    magnitude: float
    pga: float
    soil_type: SoilType = SoilType.UNKNOWN
    material_type: MaterialType = MaterialType.UNKNOWN
    floor_count: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "magnitude", _coerce_float(self.magnitude, "magnitude"))
        pga = _coerce_float(self.pga, "pga")
        if pga < 0:
            raise InvalidInputError("pga must be >= 0", field="pga")
        object.__setattr__(self, "pga", pga)
        object.__setattr__(self, "soil_type", SoilType.from_raw(self.soil_type))
        object.__setattr__(self, "material_type", MaterialType.from_raw(self.material_type))
        object.__setattr__(self, "floor_count", _coerce_floor_count(self.floor_count))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AnalysisInput":
        """
        Build from a dict using either the wire keys (mag, pga, soil, material, floors)
        or the attribute names. Missing magnitude, pga or floors raise InvalidInputError.
        """

        def pick(*keys: str) -> Any:
            for key in keys:
                if key in data:
                    return data[key]
            return None

        magnitude = pick("mag", "magnitude")
        pga = pick("pga")
        floors = pick("floors", "floor_count")
        for name, value in (("magnitude", magnitude), ("pga", pga), ("floor_count", floors)):
            if value is None:
                raise InvalidInputError(f"missing field: {name}", field=name)
        return cls(
            magnitude=magnitude,
            pga=pga,
            soil_type=pick("soil", "soil_type"),
            material_type=pick("material", "material_type"),
            floor_count=floors,
        )

    def to_payload(self) -> dict[str, Any]:
        """Wire body for POST /predict."""
        return {
            "mag": self.magnitude,
            "pga": self.pga,
            "soil": self.soil_type.value,
            "material": self.material_type.value,
            "floors": self.floor_count,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "magnitude": self.magnitude,
            "pga": self.pga,
            "soil_type": self.soil_type.value,
            "material_type": self.material_type.value,
            "floor_count": self.floor_count,
        }


@dataclass(frozen=True)
class ComponentDamage:
    """Per-subsystem damage percents, each 0-100."""

    foundation: int
    pillars: int
    walls: int
    roof: int
    utilities: int

    def to_dict(self) -> dict[str, int]:
        return {
            "foundation": self.foundation,
            "pillars": self.pillars,
            "walls": self.walls,
            "roof": self.roof,
            "utilities": self.utilities,
        }


@dataclass(frozen=True)
class DamageResult:
    overall_damage: int
    components: ComponentDamage

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_damage": self.overall_damage,
            "components": self.components.to_dict(),
        }


@dataclass(frozen=True)
class FloorDisplacement:
    floor_index: int
    drift_mm: float
    """Inter-storey drift, mm, 1 decimal."""
    cumulative_displacement_mm: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "floor_index": self.floor_index,
            "drift_mm": self.drift_mm,
            "cumulative_displacement_mm": self.cumulative_displacement_mm,
        }


@dataclass(frozen=True)
class DisplacementSeries:
    floors: tuple[FloorDisplacement, ...]
    base_shear_kn: float

    @property
    def roof_displacement_mm(self) -> int:
        return self.floors[-1].cumulative_displacement_mm if self.floors else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "floors": [f.to_dict() for f in self.floors],
            "base_shear_kn": self.base_shear_kn,
        }


@dataclass(frozen=True)
class SensitivityDriver:
    label: str
    weight: float

    @property
    def percent(self) -> int:
        """Weight rounded for display."""
        return round_int(self.weight)

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "weight": self.weight, "percent": self.percent}


@dataclass(frozen=True)
class PredictionResponse:
    """Body of a successful POST /predict."""

    damage_score: float
    confidence: float
    model_tags: tuple[str, ...]
    timestamp: str

    @classmethod
    def from_payload(cls, payload: Any) -> "PredictionResponse":
        """Parse a decoded JSON body; raise ValueError when damageScore is missing, not numeric or outside 0-100."""
        if not isinstance(payload, Mapping):
            raise ValueError("prediction body is not a JSON object")
        score = payload.get("damageScore")
        if isinstance(score, bool) or not isinstance(score, (int, float)) or not math.isfinite(score):
            raise ValueError(f"damageScore missing or not numeric: {score!r}")
        if not 0 <= score <= 100:
            raise ValueError(f"damageScore out of range 0-100: {score!r}")
        confidence = payload.get("confidence")
        if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
            confidence = float("nan")
        tags = payload.get("modelTags") or []
        return cls(
            damage_score=float(score),
            confidence=float(confidence),
            model_tags=tuple(str(t) for t in tags) if isinstance(tags, list) else (),
            timestamp=str(payload.get("timestamp") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "damageScore": self.damage_score,
            "confidence": self.confidence,
            "modelTags": list(self.model_tags),
            "timestamp": self.timestamp,
        }


class EngineMode(str, Enum):
    DETERMINISTIC = "deterministic"
    SCIENTIFIC = "scientific"


@dataclass(frozen=True)
class RemoteScore:
    """Score produced by the prediction service."""

    score: float
    prediction: PredictionResponse
    source: str = field(default="remote", init=False)


@dataclass(frozen=True)
class FallbackScore:
    """Deterministic score used because the prediction service failed."""

    score: float
    reason: str
    source: str = field(default="fallback", init=False)


@dataclass(frozen=True)
class DeterministicScore:
    """Score from the deterministic model, requested directly."""

    score: float
    source: str = field(default="deterministic", init=False)


ScoreOutcome = Union[DeterministicScore, RemoteScore, FallbackScore]


@dataclass(frozen=True)
class AnalysisReport:
    """Everything one analysis produces; consumers render it, the engine never reads it back."""

    inputs: AnalysisInput
    mode: EngineMode
    outcome: ScoreOutcome
    damage: DamageResult
    base_shear_kn: float
    confidence_band: int
    sensitivity: tuple[SensitivityDriver, ...]
    risk_level: str
    seismic_zone: str
    explanation: str
    displacement: DisplacementSeries | None = None
    notice: str | None = None

    @property
    def used_fallback(self) -> bool:
        return isinstance(self.outcome, FallbackScore)

    def to_dict(self) -> dict[str, Any]:
        outcome: dict[str, Any] = {"source": self.outcome.source, "score": self.outcome.score}
        if isinstance(self.outcome, RemoteScore):
            outcome["prediction"] = self.outcome.prediction.to_dict()
        elif isinstance(self.outcome, FallbackScore):
            outcome["reason"] = self.outcome.reason
        return {
            "inputs": self.inputs.to_dict(),
            "mode": self.mode.value,
            "outcome": outcome,
            "damage": self.damage.to_dict(),
            "base_shear_kn": self.base_shear_kn,
            "base_shear_mn": round(self.base_shear_kn / 1000.0, 2),
            "confidence_band": self.confidence_band,
            "sensitivity": [d.to_dict() for d in self.sensitivity],
            "risk_level": self.risk_level,
            "seismic_zone": self.seismic_zone,
            "explanation": self.explanation,
            "displacement": self.displacement.to_dict() if self.displacement else None,
            "notice": self.notice,
        }
