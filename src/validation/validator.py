# src/validation/validator.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from src.config.limits import Limits
from src.config.loader import load_document
from src.instance.model import ProblemInstance
from src.solution.model import Solution
from src.validation.checks import check_wave_sizes, check_batch_volumes, check_orders_fulfilled
from src.validation.costs import CostSummary, compute_costs
from src.report.kpis import BatchCostRow, to_rows

logger = logging.getLogger(__name__)


@dataclass
class ValidationReport:
    costs: CostSummary
    wave_sizes: Dict[str, int]
    batch_volumes: Dict[str, float]
    order_waves: Dict[str, Any]
    batch_rows: List[BatchCostRow] = field(default_factory=list)


class Validator:
    """
    Corre en orden: tamaño de waves, volumen de batches, cumplimiento de pedidos, costos.
    La primera violación lanza una subclase de ValidationError y corta todo.
    """

    def __init__(self, instance: ProblemInstance, solution: Solution, limits: Optional[Limits] = None):
        self.instance = instance
        self.solution = solution
        self.limits = limits or Limits.default()
        self.limits.validate()

    @staticmethod
    def from_files(instance_path: Path, solution_path: Path, limits: Optional[Limits] = None) -> "Validator":
        instance = ProblemInstance.from_dict(load_document(instance_path))
        solution = Solution.from_dict(load_document(solution_path))
        logger.info("Instancia: %d artículos, %d pedidos | Solución: %d batches, %d waves",
                    len(instance.articles), len(instance.orders),
                    len(solution.batches), len(solution.waves))
        return Validator(instance, solution, limits)

    def run(self) -> ValidationReport:
        wave_sizes = check_wave_sizes(self.solution, self.limits)
        batch_volumes = check_batch_volumes(self.solution, self.instance, self.limits)
        order_waves = check_orders_fulfilled(self.solution, self.instance)

        costs = compute_costs(self.solution, self.instance, self.limits)
        logger.info("Costos: tour=%s rest=%s total=%s", costs.tour_cost, costs.rest_cost, costs.total_cost)
        rows = to_rows(self.solution, self.instance, self.limits, batch_volumes)
        return ValidationReport(
            costs=costs,
            wave_sizes=wave_sizes,
            batch_volumes=batch_volumes,
            order_waves=order_waves,
            batch_rows=rows,
        )


def validate(instance: ProblemInstance, solution: Solution, limits: Optional[Limits] = None) -> CostSummary:
    """Atajo: valida y devuelve solo el resumen de costos."""
    return Validator(instance, solution, limits).run().costs
