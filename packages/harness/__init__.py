from .core import MAX_TURNS, run_case, run_batch
from .io import write_csv, write_bench_report, summarize

__all__ = ["MAX_TURNS", "run_case", "run_batch", "write_csv", "write_bench_report", "summarize"]
