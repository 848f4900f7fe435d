import argparse
import json
from pathlib import Path

from src.config.limits import load_limits
from src.config.loader import load_document, write_document
from src.instance.model import ProblemInstance
from src.solution.builder import build_solution
from src.solution.model import Solution
from src.validation.validator import validate

def main(argv=None):
    parser = argparse.ArgumentParser(description="Construir una solución voraz para una instancia.")
    parser.add_argument("instance", type=Path, help="Instancia (JSON/YAML)")
    parser.add_argument("--out", type=Path, default=Path("outputs/solution.json"))
    parser.add_argument("--config", type=Path, help="Límites y costos en JSON/YAML (opcional)")
    args = parser.parse_args(argv)

    limits = load_limits(args.config)
    instance = ProblemInstance.from_dict(load_document(args.instance))
    doc = build_solution(instance, limits)
    out = write_document(args.out, doc)
    print(f"[OK] Solución → {out}  (waves: {len(doc['Waves'])}, batches: {len(doc['Batches'])})")

    costs = validate(instance, Solution.from_dict(doc), limits)
    print(json.dumps(costs.to_dict()))

if __name__ == "__main__":
    main()
