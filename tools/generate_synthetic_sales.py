# tools/generate_synthetic_sales.py
"""
Generate the sample monthly sales file (24 months from January 2022,
seasonality + trend + noise) in the upload format: date,value.
Writes sample_sales_data.csv in repo root.
"""
import sys
from pathlib import Path

import numpy as np

from demand_forecast.csv_io import write_sample_csv

OUT = Path("sample_sales_data.csv")

# Fixed seed so the committed sample stays stable; pass another as argv[1]
SEED = int(sys.argv[1]) if len(sys.argv) > 1 else 42

rng = np.random.default_rng(SEED)
text = write_sample_csv(OUT, rng=rng)
print(f"WROTE {OUT} ({len(text.splitlines()) - 1} rows)")
