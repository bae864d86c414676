"""End-to-end design pipeline."""

from .runner import DesignCache, DesignOutcome, fingerprint, run_design

__all__ = ["DesignCache", "DesignOutcome", "fingerprint", "run_design"]
