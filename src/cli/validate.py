import argparse
import json
import logging
import sys
from pathlib import Path

from src.config.limits import load_limits
from src.validation.errors import ValidationError
from src.validation.validator import Validator
from src.report.export import write_batch_costs
from src.report.plots import plot_tour_cost_by_batch, plot_wave_sizes

DEFAULT_INSTANCE = Path("./instances/instance4.json")
DEFAULT_SOLUTION = Path("./solutions/output4.json")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validar una solución de waves/batches y calcular su costo.")
    parser.add_argument("instance", type=Path, nargs="?", default=DEFAULT_INSTANCE, help="Instancia (JSON/YAML)")
    parser.add_argument("solution", type=Path, nargs="?", default=DEFAULT_SOLUTION, help="Solución (JSON/YAML)")
    parser.add_argument("--config", type=Path, help="Límites y costos en JSON/YAML (opcional)")
    parser.add_argument("--breakdown-csv", type=Path, help="Escribe el costo por batch en CSV")
    parser.add_argument("--plot", type=Path, help="PNG con el costo de tour por batch (requiere --breakdown-csv)")
    parser.add_argument("--wave-plot", type=Path, help="PNG con la distribución de tamaño de wave (requiere --breakdown-csv)")
    parser.add_argument("--verbose", action="store_true", help="Log de progreso en stderr")
    return parser

def _fail(message: str):
    # una sola línea de diagnóstico
    print(" ".join(message.split()))
    raise SystemExit(1)

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.plot or args.wave_plot) and not args.breakdown_csv:
        parser.error("--plot y --wave-plot requieren --breakdown-csv")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                            stream=sys.stderr)

    try:
        limits = load_limits(args.config)
    except (ValueError, AssertionError, OSError) as e:
        _fail(f"Configuración inválida ({args.config}): {e}")

    try:
        report = Validator.from_files(args.instance, args.solution, limits).run()
    except ValidationError as e:
        _fail(str(e))

    print(json.dumps(report.costs.to_dict()))

    if args.breakdown_csv:
        write_batch_costs(report.batch_rows, args.breakdown_csv)
        if args.plot:
            plot_tour_cost_by_batch(args.breakdown_csv, args.plot)
        if args.wave_plot:
            plot_wave_sizes(args.breakdown_csv, args.wave_plot)
    return 0

if __name__ == "__main__":
    sys.exit(main())
