import io
import csv
import re
from datetime import date
from typing import List, Optional

BALANCE_CSV_HEADER = ["Time", "Cash Balance", "Change", "Action", "Asset Price"]

def build_balance_csv(events: List) -> str:
    """Render balance events as CSV, two decimals, no trailing newline."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(BALANCE_CSV_HEADER)
    for e in events:
        price = f"{e.price:.2f}" if e.price is not None else "N/A"
        writer.writerow([e.time, f"{e.balance:.2f}", f"{e.change:.2f}", e.action, price])
    return output.getvalue().rstrip("\n")

def build_export_filename(asset_name: str, on: Optional[date] = None) -> str:
    on = on or date.today()
    safe_name = re.sub(r"[^A-Za-z0-9_-]+", "_", asset_name or "").strip("_") or "asset"
    return f"balance_history_{safe_name}_{on.isoformat()}.csv"
