# order_timeline/timeline/dedupe.py
from __future__ import annotations

from typing import Iterable

from order_timeline.constants.statuses import StepState
from order_timeline.timeline.types import Step, Timeline

_UPGRADES_FUTURE = (StepState.CURRENT, StepState.COMPLETED)


def dedupe(steps: Iterable[Step]) -> Timeline:
    """
    Keep the first occurrence of each step id.

    A later duplicate that is current/completed upgrades a kept step that is
    still future; otherwise the duplicate is dropped.
    """
    kept: list[Step] = []
    position: dict[str, int] = {}

    for step in steps:
        i = position.get(step.id)
        if i is None:
            position[step.id] = len(kept)
            kept.append(step)
            continue
        if kept[i].state == StepState.FUTURE and step.state in _UPGRADES_FUTURE:
            kept[i] = kept[i].with_state(step.state)

    return tuple(kept)
