"""
Candidate resolver module.
Turns a free-text search term into fully resolved title summaries, one lookup per hit.
"""

from typing import List, Optional  # type annotations

# Console logging
from loguru import logger  # console logger

from .errors import UpstreamError  # per-hit lookup failures are skipped
from .models import NotFound, TitleSummary  # lookup outcomes and result type
from .omdb_client import OMDbClient  # provider access


class CandidateResolver:
	"""
	Search, then resolve every hit by title.
	Costs one search call plus one lookup per hit, so callers bound terms and hits.
	"""

	def __init__(self, client: OMDbClient, max_hits: Optional[int] = 10):
		self.client = client  # shared provider client
		self.max_hits = max_hits  # None resolves every hit on the page

	def resolve(
		self,
		term: str,
		genre: Optional[str] = None,  # keep only records whose genre contains this
		exclude_title: Optional[str] = None,  # drop hits with this exact title (case-insensitive)
	) -> List[TitleSummary]:
		"""
		Return resolved candidates for `term` in discovery order.
		A failure of the search call itself propagates; a failed or missing lookup for a single hit is skipped.
		"""
		outcome = self.client.search(term)
		if isinstance(outcome, NotFound):
			logger.debug(f"[Resolver] No search results for '{term}': {outcome.message}")
			return []

		hits = outcome.value.hits
		if self.max_hits is not None:
			hits = hits[:self.max_hits]

		candidates: List[TitleSummary] = []
		for hit in hits:
			# Skip the excluded title before spending a lookup on it
			if exclude_title is not None and hit.title.lower() == exclude_title.lower():
				logger.debug(f"[Resolver] Skipping excluded title '{hit.title}'")
				continue

			# Resolve by title rather than identifier; same-name titles may resolve to another entry
			try:
				lookup = self.client.get_title(hit.title)
			except UpstreamError as e:
				logger.debug(f"[Resolver] Lookup failed for hit '{hit.title}': {e}")
				continue
			if isinstance(lookup, NotFound):
				logger.debug(f"[Resolver] Hit '{hit.title}' did not resolve: {lookup.message}")
				continue

			summary = TitleSummary.from_record(lookup.value)
			if genre is not None and genre.lower() not in summary.genres.lower():
				continue
			candidates.append(summary)

		logger.debug(f"[Resolver] '{term}' -> {len(candidates)} of {len(hits)} hits kept")
		return candidates
