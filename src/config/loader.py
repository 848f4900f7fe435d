from pathlib import Path
from typing import Dict, Any
import json
import logging

import yaml

logger = logging.getLogger(__name__)

def load_document(path: Path) -> Dict[str, Any]:
    """Lee un documento JSON o YAML (instancia, solución o límites)."""
    path = Path(path)
    suffix = path.suffix.lower()
    logger.debug("Leyendo %s", path)
    if suffix == ".json":
        return json.loads(path.read_text(encoding="utf-8"))
    if suffix in {".yml", ".yaml"}:
        try:
            return yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"YAML inválido en {path}: {e}") from e
    raise ValueError(f"Formato no soportado: {path.suffix} (usa .json o .yaml)")

def write_document(path: Path, doc: Dict[str, Any]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(doc, f, ensure_ascii=False, indent=2)
    return path
