from pathlib import Path
from typing import Iterable
import csv

from src.report.kpis import BatchCostRow, BATCH_FIELDS

def write_batch_costs(rows: Iterable[BatchCostRow], out_csv: Path) -> Path:
    out_csv = Path(out_csv)
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    with out_csv.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=BATCH_FIELDS)
        w.writeheader()
        for row in rows:
            w.writerow(row.to_dict())
    return out_csv
