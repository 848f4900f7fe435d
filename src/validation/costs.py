from dataclasses import dataclass
from typing import Any, Dict, Optional, Set

from src.config.limits import Limits
from src.instance.model import ProblemInstance
from src.solution.model import Batch, Solution

@dataclass
class CostSummary:
    tour_cost: float
    rest_cost: float
    total_cost: float

    def to_dict(self) -> Dict[str, float]:
        """Registro de salida con las claves del formato original."""
        return {
            "tourCost": self.tour_cost,
            "restCost": self.rest_cost,
            "totalCost": self.total_cost,
        }

@dataclass
class BatchTour:
    n_warehouses: int
    n_aisles: int
    cost: float

def batch_tour(batch: Batch, instance: ProblemInstance, limits: Limits) -> BatchTour:
    """
    Almacenes y pasillos distintos que toca el batch.
    Almacenes se comparan tal cual (1 y "1" son dos almacenes).
    El pasillo se identifica por el texto almacén+pasillo (ver ArticleLocation.aisle_key).
    """
    locs = [instance.location_of(aid) for aid in batch.article_ids()]
    warehouses: Set[Any] = {l.warehouse for l in locs}
    aisles: Set[str] = {l.aisle_key for l in locs}
    cost = len(warehouses) * limits.cost_per_warehouse + len(aisles) * limits.cost_per_aisle
    return BatchTour(n_warehouses=len(warehouses), n_aisles=len(aisles), cost=cost)

def tour_cost(solution: Solution, instance: ProblemInstance, limits: Limits) -> float:
    return sum(batch_tour(b, instance, limits).cost for b in solution.batches)

def rest_cost(solution: Solution, limits: Limits) -> float:
    return len(solution.waves) * limits.cost_per_wave + len(solution.batches) * limits.cost_per_batch

def compute_costs(solution: Solution, instance: ProblemInstance, limits: Optional[Limits] = None) -> CostSummary:
    limits = limits or Limits.default()
    tour = tour_cost(solution, instance, limits)
    rest = rest_cost(solution, limits)
    return CostSummary(tour_cost=tour, rest_cost=rest, total_cost=tour + rest)

def batch_wave_index(solution: Solution) -> Dict[Any, Any]:
    """BatchId -> WaveId de la primera wave que lo referencia."""
    out: Dict[Any, Any] = {}
    for w in solution.waves:
        for bid in w.batch_ids:
            out.setdefault(bid, w.wave_id)
    return out
