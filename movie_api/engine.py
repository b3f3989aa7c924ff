"""
Movie engine module.
High-level facade that wires the OMDb client, candidate resolver, and both pipelines together.
"""

from typing import Optional  # optional injected parts

# Import project modules for data structures and components
from .config import Settings  # runtime settings
from .genre_parser import GenreNormalizer  # user genre input -> provider label
from .genre_ranking import GenreRanker  # top titles of a genre
from .models import GenreRanking, LookupResult, Recommendations  # results
from .omdb_client import OMDbClient  # provider access
from .recommendations import Recommender  # tiered recommendations
from .resolver import CandidateResolver  # search + per-hit lookup

# Import loguru for console logging
from loguru import logger  # simple structured logger


class MovieEngine:
	"""
	One object per process: owns the provider client and exposes the four operations the API serves.
	Pass a pre-built client to substitute the transport (tests, scripts).
	"""

	def __init__(
		self,
		client: OMDbClient,  # provider client, shared by every pipeline
		max_workers: int = 1,  # concurrent search terms / attribute values
		max_hits: Optional[int] = 10,  # hits resolved per search
		normalizer: Optional[GenreNormalizer] = None,  # genre input cleanup
		current_year: Optional[int] = None,  # pins the year-based genre searches
	):
		self.client = client  # keep reference for direct lookups
		self.resolver = CandidateResolver(client, max_hits=max_hits)  # shared resolver
		self.genre_ranker = GenreRanker(self.resolver, max_workers=max_workers, current_year=current_year)
		self.recommender = Recommender(client, self.resolver, max_workers=max_workers)
		self.normalizer = normalizer or GenreNormalizer()
		logger.info(f"[Engine] Ready | base_url={client.base_url} | workers={max_workers} | max_hits={max_hits}")

	@classmethod
	def from_settings(cls, settings: Settings, client: Optional[OMDbClient] = None) -> 'MovieEngine':
		"""Build an engine from settings, creating the client unless one is supplied."""
		return cls(
			client or OMDbClient.from_settings(settings),
			max_workers=settings.max_workers,
			max_hits=settings.max_hits_per_search,
		)

	def movie_details(self, title: str) -> LookupResult:
		"""Single movie lookup by title."""
		logger.debug(f"[Engine] movie_details '{title}'")
		return self.client.get_title(title)

	def episode_details(self, series_title: str, season: int, episode: int) -> LookupResult:
		"""Single episode lookup."""
		logger.debug(f"[Engine] episode_details '{series_title}' S{season}E{episode}")
		return self.client.get_episode(series_title, season, episode)

	def top_by_genre(self, genre: str) -> GenreRanking:
		"""Normalize the genre name, then run the genre ranking pipeline."""
		label = self.normalizer.normalize(genre)
		if label != genre.strip():
			logger.info(f"[Engine] Genre '{genre}' normalized to '{label}'")
		return self.genre_ranker.rank(label)

	def recommend(self, favorite_title: str) -> Recommendations:
		"""Run the recommendation pipeline for a favorite title."""
		return self.recommender.recommend(favorite_title.strip())
