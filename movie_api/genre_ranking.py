"""
Genre ranking pipeline.
The provider cannot filter by genre, so several heuristic searches are fanned out and the
resolved candidates are filtered, deduplicated, and ranked by IMDb rating.
"""

from datetime import date
from typing import List, Optional

from loguru import logger

from .errors import NoResultsError, UpstreamError
from .fanout import fan_out
from .models import GenreRanking
from .ranking import filter_and_dedup, sort_by_rating
from .resolver import CandidateResolver


class GenreRanker:
	"""Top-N titles of a genre, best rated first."""

	def __init__(
		self,
		resolver: CandidateResolver,
		top_n: int = 15,
		candidate_bound: int = 50,  # stop launching searches once this many raw candidates arrived
		years_back: int = 10,
		max_workers: int = 1,
		current_year: Optional[int] = None,  # defaults to today's year
	):
		self.resolver = resolver
		self.top_n = top_n
		self.candidate_bound = candidate_bound
		self.years_back = years_back
		self.max_workers = max_workers
		self.current_year = current_year

	def search_terms(self, genre: str) -> List[str]:
		"""Bare genre, two phrasings, then the genre paired with each recent year, newest first."""
		year = self.current_year or date.today().year
		terms = [genre, f"{genre} movie", f"best {genre}"]
		terms.extend(f"{genre} {y}" for y in range(year, year - self.years_back - 1, -1))
		return terms

	def rank(self, genre: str) -> GenreRanking:
		"""
		Build the ranking for `genre`.
		Raises NoResultsError when nothing valid was found, and UpstreamError only when
		every search that ran failed upstream.
		"""
		terms = self.search_terms(genre)
		logger.info(f"[GenreRanker] Ranking '{genre}' with up to {len(terms)} search terms")

		report = fan_out(
			terms,
			lambda term: self.resolver.resolve(term, genre=genre),
			max_workers=self.max_workers,
			limit=self.candidate_bound,
			label=f"genre '{genre}'",
		)
		if report.all_failed:
			first_error = report.failures[0][1]
			raise UpstreamError(
				f"All {len(report.failures)} searches for genre '{genre}' failed"
			) from first_error

		candidates = report.candidates
		unique = filter_and_dedup(candidates, genre)
		titles = sort_by_rating(unique)[:self.top_n]
		logger.info(
			f"[GenreRanker] '{genre}': {len(candidates)} candidates, {len(unique)} unique valid, returning {len(titles)}"
		)

		if not titles:
			raise NoResultsError(genre)
		return GenreRanking(genre=genre, titles=titles, total=len(titles))
