from dataclasses import dataclass, asdict
from typing import Dict, Any, List

from src.config.limits import Limits
from src.instance.model import ProblemInstance, as_text
from src.solution.model import Solution
from src.validation.costs import batch_tour, batch_wave_index

BATCH_FIELDS = [
    "batch_id", "wave_id", "n_items", "volume",
    "n_warehouses", "n_aisles", "tour_cost",
]

@dataclass
class BatchCostRow:
    batch_id: str
    wave_id: str
    n_items: int
    volume: float
    n_warehouses: int
    n_aisles: int
    tour_cost: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

def to_rows(solution: Solution, instance: ProblemInstance, limits: Limits,
            volumes: Dict[str, float]) -> List[BatchCostRow]:
    """Una fila por batch, en el orden del documento de solución."""
    wave_of = batch_wave_index(solution)
    rows: List[BatchCostRow] = []
    for b in solution.batches:
        key = as_text(b.batch_id)
        tour = batch_tour(b, instance, limits)
        rows.append(BatchCostRow(
            batch_id=key,
            wave_id=as_text(wave_of[b.batch_id]) if b.batch_id in wave_of else "",
            n_items=b.size,
            volume=volumes.get(key, 0.0),
            n_warehouses=tour.n_warehouses,
            n_aisles=tour.n_aisles,
            tour_cost=tour.cost,
        ))
    return rows
