"""
Example 00: Calibration table.

Goal:
    Show how k and beta grow as the (epsilon, delta) budget tightens, and
    how long each calibration takes.

Usage:
    python examples/basic/00_calibration_table.py --epsilon 1.0
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
for entry in (project_root, src_root):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from examples._shared import cli, io
from sdgslib.core.utils import Timer, configure_logging
from sdgslib.sdgs import calibrate

DELTAS = (1e-2, 1e-3, 1e-4, 1e-5, 1e-6)


def main(argv=None):
    args = cli.parse_args("Calibration table", argv)
    configure_logging(args.log_level)

    rows = []
    for delta in DELTAS:
        with Timer() as timer:
            parameters = calibrate(args.epsilon, delta)
        rows.append({"delta": delta, "k": parameters.k, "beta": parameters.beta, "seconds": round(timer.elapsed, 4)})

    result = {
        "name": "basic/00_calibration_table",
        "config": {"epsilon": args.epsilon},
        "outputs": {"table": rows},
        "metrics": {f"k@{row['delta']:g}": row["k"] for row in rows},
        "artifacts": {},
    }
    path = io.write_report(result, Path(args.outdir) / "00_calibration_table.json")
    result["artifacts"]["json"] = str(path)
    return result


if __name__ == "__main__":
    io.print_summary(main())
