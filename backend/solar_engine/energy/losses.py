"""Sequential loss waterfall.

Each loss is applied to what is left after the previous ones, so the
final performance ratio is a product, not a sum, of the individual
factors.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..equipment import LossFactors


@dataclass(frozen=True)
class LossStep:
    label: str
    value: float                 # loss in PR points; the nominal/final rows carry the level
    running_value: float         # PR remaining after this step
    step_label: str = ""         # e.g. "-2.0%"


@dataclass(frozen=True)
class LossWaterfall:
    final_pr: float              # (%)
    steps: list[LossStep]


def _ordered_losses(factors: LossFactors) -> list[tuple[str, float]]:
    return [
        ("Soiling", factors.soiling),
        ("Shading", factors.shading),
        ("IAM", factors.iam_loss),
        ("Mismatch", factors.mismatch),
        ("LID", factors.lid),
        ("DC Wiring", factors.dc_wiring),
        ("Inverter", 100.0 - factors.inverter_efficiency),
        ("AC Wiring", factors.ac_wiring),
        ("Availability", factors.availability),
    ]


def loss_waterfall(factors: LossFactors | None = None) -> LossWaterfall:
    """Apply the loss factors in order, starting from a nominal 100 %.

    ``None`` means the default factors.
    """
    factors = factors or LossFactors()

    current = 100.0
    steps = [LossStep("Nominal", 100.0, 100.0)]
    for label, pct in _ordered_losses(factors):
        loss = current * pct / 100.0
        current -= loss
        steps.append(LossStep(label, loss, current, f"-{pct:g}%"))
    steps.append(LossStep("Final PR", current, current))

    return LossWaterfall(final_pr=current, steps=steps)
