"""Energy yield engine -- generation profiles, loss waterfall and storage estimate."""

from .bess import BessResult, simulate_bess
from .generation import GenerationProfile, bell_curve_profile, estimate_generation, performance_ratio
from .losses import LossStep, LossWaterfall, loss_waterfall

__all__ = [
    "BessResult",
    "simulate_bess",
    "GenerationProfile",
    "bell_curve_profile",
    "estimate_generation",
    "performance_ratio",
    "LossStep",
    "LossWaterfall",
    "loss_waterfall",
]
