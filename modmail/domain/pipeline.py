"""Ordered pipeline of dependent outbound calls.

Each step receives the results of the steps before it, keyed by step name.
The first failing step aborts the pipeline and its exception propagates.
"""

import sys
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List


def _log(msg: str):
    print(msg, file=sys.stderr)


StepFn = Callable[[Dict[str, Any]], Awaitable[Any]]


@dataclass
class Step:
    name: str
    run: StepFn


class Pipeline:
    def __init__(self, name: str):
        self.name = name
        self._steps: List[Step] = []

    def step(self, name: str, run: StepFn) -> "Pipeline":
        if name in self.step_names:
            raise ValueError(f"duplicate step name {name!r}")
        self._steps.append(Step(name=name, run=run))
        return self

    @property
    def step_names(self) -> List[str]:
        return [s.name for s in self._steps]

    async def run(self) -> Dict[str, Any]:
        results: Dict[str, Any] = {}
        for step in self._steps:
            try:
                results[step.name] = await step.run(results)
            except Exception as e:
                _log(f"[pipeline] {self.name}: step {step.name!r} of {self.step_names} failed: {e}")
                raise
        return results
