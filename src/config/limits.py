from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Dict, Any, Optional

from src.config.loader import load_document

MAX_WAVE_SIZE = 250
MAX_BATCH_VOLUME = 10000
COST_PER_WAREHOUSE = 10
COST_PER_AISLE = 5
COST_PER_WAVE = 10
COST_PER_BATCH = 5

@dataclass
class Limits:
    """Límites de tamaño y tarifas de costo usados por el validador."""
    max_wave_size: int = MAX_WAVE_SIZE
    max_batch_volume: float = MAX_BATCH_VOLUME
    cost_per_warehouse: float = COST_PER_WAREHOUSE
    cost_per_aisle: float = COST_PER_AISLE
    cost_per_wave: float = COST_PER_WAVE
    cost_per_batch: float = COST_PER_BATCH

    @staticmethod
    def default() -> "Limits":
        return Limits()

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> "Limits":
        """
        Acepta un subconjunto de claves; lo que falte toma el valor por defecto.
        Un documento vacío (None) da los valores por defecto.
        Claves desconocidas o un documento que no es un mapeo lanzan ValueError.
        """
        if d is None:
            return Limits()
        if not isinstance(d, dict):
            raise ValueError(f"La configuración de límites debe ser un mapeo, no {type(d).__name__}")
        known = {f.name for f in fields(Limits)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"Claves de límites desconocidas: {sorted(unknown)}")
        return Limits(**d)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            assert isinstance(value, (int, float)) and not isinstance(value, bool), \
                f"{f.name} debe ser numérico, no {value!r}"
        assert self.max_wave_size > 0, "max_wave_size debe ser > 0"
        assert self.max_batch_volume > 0, "max_batch_volume debe ser > 0"
        for name in ("cost_per_warehouse", "cost_per_aisle", "cost_per_wave", "cost_per_batch"):
            assert getattr(self, name) >= 0, f"{name} no puede ser negativo"

    def summary(self) -> str:
        s = []
        s.append("=== LÍMITES Y COSTOS ===")
        s.append(f"Tamaño máx. de wave: {self.max_wave_size} ítems")
        s.append(f"Volumen máx. de batch: {self.max_batch_volume}")
        s.append("\nCostos:")
        s.append(f"- por almacén visitado = {self.cost_per_warehouse}")
        s.append(f"- por pasillo visitado = {self.cost_per_aisle}")
        s.append(f"- por wave = {self.cost_per_wave}")
        s.append(f"- por batch = {self.cost_per_batch}")
        return "\n".join(s)

def load_limits(path: Optional[Path] = None) -> Limits:
    """Límites por defecto, o leídos de un JSON/YAML y validados."""
    limits = Limits.default() if not path else Limits.from_dict(load_document(path))
    limits.validate()
    return limits
