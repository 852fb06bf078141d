from .pipeline import run_merge

__all__ = ["run_merge"]
