"""Micro-benchmark: build and serialize a reference template in a loop."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from kakao_skill.l1_entities.template import Template

log = logging.getLogger('kskill.bench')


@dataclass(frozen=True)
class BenchmarkResult:
    name: str
    iterations: int
    total_seconds: float
    payload_bytes: int

    @property
    def per_iteration_us(self) -> float:
        return self.total_seconds / self.iterations * 1_000_000


def run_benchmark(
    name: str,
    builder: Callable[[], Template],
    iterations: int,
    *,
    decode: bool = False,
    clock: Callable[[], float] = time.perf_counter,
) -> BenchmarkResult:
    """Time *iterations* rounds of build → ``to_json`` (→ ``from_json`` when *decode*)."""
    if iterations < 1:
        raise ValueError(f'iterations must be positive, got {iterations}')
    body = ''
    start = clock()
    for _ in range(iterations):
        body = builder().to_json()
        if decode:
            Template.from_json(body)
    elapsed = clock() - start
    result = BenchmarkResult(
        name=name,
        iterations=iterations,
        total_seconds=elapsed,
        payload_bytes=len(body.encode('utf-8')),
    )
    log.info('bench %s: %d iterations in %.4fs', name, iterations, elapsed)
    return result
