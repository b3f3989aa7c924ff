"""
Recommendation pipeline.
Derives genre, director, and lead-actor searches from a favorite title and ranks each tier independently.
"""

from typing import List, Tuple

from loguru import logger

from .errors import SeedNotFoundError
from .fanout import fan_out
from .models import NOT_AVAILABLE, NotFound, RecommendationTier, Recommendations, TitleRecord, TitleSummary
from .omdb_client import OMDbClient
from .ranking import dedup_and_bound
from .resolver import CandidateResolver


GENRE_TIER = (1, 'Movies in the same genre')
DIRECTOR_TIER = (2, 'Movies by the same director')
ACTOR_TIER = (3, 'Movies with the same main actors')


def split_values(value: str) -> List[str]:
	"""Split a comma-separated provider field into trimmed, non-empty parts."""
	if not value:
		return []
	return [part.strip() for part in value.split(',') if part.strip()]


def known_values(value: str) -> List[str]:
	"""Like split_values, but without the provider's "N/A" placeholder."""
	return [part for part in split_values(value) if part != NOT_AVAILABLE]


class Recommender:
	"""Tiered recommendations seeded by one favorite title."""

	def __init__(
		self,
		client: OMDbClient,
		resolver: CandidateResolver,
		tier_limit: int = 20,
		lead_actors: int = 2,
		max_workers: int = 1,
	):
		self.client = client
		self.resolver = resolver
		self.tier_limit = tier_limit
		self.lead_actors = lead_actors
		self.max_workers = max_workers

	def attribute_sets(self, record: TitleRecord) -> List[Tuple[Tuple[int, str], List[str]]]:
		"""Search values per tier: every genre, every known director, the first lead actors."""
		return [
			(GENRE_TIER, split_values(record.genre)),
			(DIRECTOR_TIER, known_values(record.director)),
			(ACTOR_TIER, [a for a in split_values(record.actors)[:self.lead_actors] if a != NOT_AVAILABLE]),
		]

	def recommend(self, favorite_title: str) -> Recommendations:
		"""
		Resolve the seed and build its tiers.
		Raises SeedNotFoundError if the seed does not exist; an upstream failure on the seed lookup propagates.
		"""
		lookup = self.client.get_title(favorite_title)
		if isinstance(lookup, NotFound):
			logger.info(f"[Recommender] Seed '{favorite_title}' not found: {lookup.message}")
			raise SeedNotFoundError(favorite_title, lookup.message)

		record = lookup.value
		tiers: List[RecommendationTier] = []
		for (level, label), values in self.attribute_sets(record):
			members = self._build_tier(values, favorite_title, label)
			if members:
				tiers.append(RecommendationTier(level=level, label=label, members=members))
			else:
				logger.debug(f"[Recommender] Tier {level} empty for '{favorite_title}', omitted")

		logger.info(
			f"[Recommender] '{favorite_title}': {len(tiers)} tiers "
			f"({', '.join(str(len(t.members)) for t in tiers) or 'none'} titles)"
		)
		return Recommendations(seed=TitleSummary.from_record(record), tiers=tiers)

	def _build_tier(self, values: List[str], favorite_title: str, label: str) -> List[TitleSummary]:
		if not values:
			return []
		report = fan_out(
			values,
			lambda value: self.resolver.resolve(value, exclude_title=favorite_title),
			max_workers=self.max_workers,
			label=label.lower(),
		)
		return dedup_and_bound(report.candidates, self.tier_limit)
