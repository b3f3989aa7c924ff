"""
Bounded fan-out over independent units of work (search terms, attribute values).
Each unit's upstream failure is isolated; an optional candidate bound stops new units from launching.
"""

from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from loguru import logger

from .errors import UpstreamError
from .models import TitleSummary


@dataclass
class FanOutReport:
	"""Outcome of one fan-out, with successful results in unit order."""
	results: List[Tuple[str, List[TitleSummary]]] = field(default_factory=list)
	failures: List[Tuple[str, UpstreamError]] = field(default_factory=list)
	skipped: List[str] = field(default_factory=list)  # never launched because the bound was reached

	@property
	def candidates(self) -> List[TitleSummary]:
		return [item for _, items in self.results for item in items]

	@property
	def all_failed(self) -> bool:
		return bool(self.failures) and not self.results


def fan_out(
	units: Iterable[str],
	task: Callable[[str], List[TitleSummary]],
	max_workers: int = 1,
	limit: Optional[int] = None,
	label: str = 'fan-out',
) -> FanOutReport:
	"""
	Run `task` for each unit with at most `max_workers` in flight.

	Once the running candidate total reaches `limit`, no further unit is launched;
	units already in flight still complete and count. With max_workers=1 this is
	a plain sequential loop that breaks as soon as the bound is hit.
	"""
	units = list(units)
	workers = max(1, max_workers)
	outcomes: Dict[int, Tuple[str, List[TitleSummary]]] = {}
	failures: List[Tuple[int, str, UpstreamError]] = []
	total = 0
	next_index = 0

	with ThreadPoolExecutor(max_workers=workers) as executor:
		pending = {}
		while True:
			while (
				next_index < len(units)
				and len(pending) < workers
				and (limit is None or total < limit)
			):
				unit = units[next_index]
				pending[executor.submit(task, unit)] = (next_index, unit)
				next_index += 1

			if not pending:
				break

			done, _ = wait(pending, return_when=FIRST_COMPLETED)
			for future in done:
				index, unit = pending.pop(future)
				try:
					items = future.result()
				except UpstreamError as e:
					logger.warning(f"[Fanout] {label}: '{unit}' failed, skipping: {e}")
					failures.append((index, unit, e))
					continue
				outcomes[index] = (unit, items)
				total += len(items)

	report = FanOutReport(
		results=[outcomes[i] for i in sorted(outcomes)],
		failures=[(unit, error) for _, unit, error in sorted(failures, key=lambda f: f[0])],
		skipped=units[next_index:],
	)
	if report.skipped:
		logger.debug(f"[Fanout] {label}: bound {limit} reached, {len(report.skipped)} units not launched")
	logger.debug(
		f"[Fanout] {label}: {len(report.results)} ok, {len(report.failures)} failed, {total} candidates"
	)
	return report
