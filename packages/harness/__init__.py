from .core import run_query, run_batch
from .io import write_csv, write_manifest, read_queries

__all__ = ["run_query", "run_batch", "write_csv", "write_manifest", "read_queries"]
