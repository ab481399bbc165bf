"""
Simplified linear shear-building displacement model.

Each storey is a lateral spring of stiffness k = 12 E I / L^3. Base shear
V = Cs * W with Cs taken directly as the PGA and W = floors * 5000 kN. The
shear is distributed triangularly over the height; per-floor drift is
force / k and the roof displacement is the running sum. Not an FE solver.
"""

from __future__ import annotations

from seismo_damage.analysis_engine.models import AnalysisInput, DisplacementSeries, FloorDisplacement
from seismo_damage.analysis_engine.tables import ELASTIC_MODULUS_GPA
from seismo_damage.seismo_logging import get_logger
from seismo_damage.utils.rounding import round_half_up, round_int

logger = get_logger(__name__)

STORY_HEIGHT_M = 3.5
MOMENT_OF_INERTIA_M4 = 0.05
SEISMIC_WEIGHT_PER_FLOOR_KN = 5000.0
GPA_TO_KPA = 1e6
M_TO_MM = 1000.0


def story_stiffness(elastic_modulus_gpa: float) -> float:
    """Lateral stiffness of one storey (kN/m), fixed-fixed column approximation."""
    return (12.0 * elastic_modulus_gpa * GPA_TO_KPA * MOMENT_OF_INERTIA_M4) / STORY_HEIGHT_M ** 3


def base_shear(pga: float, floor_count: int) -> float:
    """V = Cs * W, Cs = PGA (kN)."""
    return pga * floor_count * SEISMIC_WEIGHT_PER_FLOOR_KN


def simulate_displacement(inputs: AnalysisInput) -> DisplacementSeries:
    """
    Per-floor drift (mm, 1 decimal) and cumulative displacement (mm, int), plus base shear (kN).

    Forces are non-negative and grow with floor index, so cumulative
    displacement never decreases up the building.
    """
    k = story_stiffness(ELASTIC_MODULUS_GPA[inputs.material_type])
    n = inputs.floor_count
    shear = base_shear(inputs.pga, n)

    floors: list[FloorDisplacement] = []
    cumulative = 0.0
    for i in range(1, n + 1):
        floor_force = shear * (i / n)
        drift = floor_force / k
        cumulative += drift
        floors.append(
            FloorDisplacement(
                floor_index=i,
                drift_mm=round_half_up(drift * M_TO_MM, 1),
                cumulative_displacement_mm=round_int(cumulative * M_TO_MM),
            )
        )

    logger.debug(
        "displacement_simulated",
        material=inputs.material_type.value,
        floors=n,
        stiffness_kn_per_m=round(k, 2),
        base_shear_kn=shear,
        roof_mm=floors[-1].cumulative_displacement_mm,
    )
    return DisplacementSeries(floors=tuple(floors), base_shear_kn=shear)
