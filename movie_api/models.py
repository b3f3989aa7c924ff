"""
Data models for the Movie API.
Defines the upstream records, tagged lookup results, and the derived views the pipelines produce.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Any, List, Union  # lists, payload values, and tagged unions


# Sentinel the provider uses for any field it has no value for
NOT_AVAILABLE = 'N/A'


@dataclass(frozen=True)
class RatingSource:
	"""One rating reported by a third party (IMDb, Rotten Tomatoes, Metacritic)."""
	source: str  # e.g., "Internet Movie Database"
	value: str  # e.g., "8.8/10" or "87%"


@dataclass(frozen=True)
class TitleRecord:
	"""
	A fully parsed single-title lookup from the provider.
	Every field is kept as the provider's text, including the "N/A" sentinel.
	"""
	title: str  # movie or episode title
	year: str  # release year, may be a range for series ("2008–2013")
	genre: str  # comma-separated genre labels
	director: str  # comma-separated directors or "N/A"
	actors: str  # comma-separated lead actors, billing order
	plot: str  # short synopsis
	imdb_rating: str  # decimal as text, or "N/A"
	rated: str = ''  # certification (PG-13, R, ...)
	released: str = ''  # release date as text
	runtime: str = ''  # e.g., "148 min"
	writer: str = ''  # comma-separated writers
	language: str = ''  # comma-separated languages
	country: str = ''  # comma-separated production countries
	awards: str = ''  # free-text awards summary
	poster: str = ''  # poster image URL
	ratings: List[RatingSource] = field(default_factory=list)  # third-party ratings
	metascore: str = ''  # Metacritic score as text
	imdb_votes: str = ''  # vote count with thousands separators
	imdb_id: str = ''  # provider identifier (tt...)
	type: str = ''  # movie, series, or episode
	season: str = ''  # episode lookups only
	episode: str = ''  # episode lookups only


@dataclass(frozen=True)
class SearchHit:
	"""A raw free-text search result, not yet resolved to full detail."""
	title: str  # title as listed by the search index
	year: str  # release year text
	identifier: str  # provider identifier (tt...)
	kind: str = ''  # provider "Type" (movie, series, episode)


@dataclass(frozen=True)
class SearchPage:
	"""One page of free-text search hits."""
	hits: List[SearchHit]  # hits in provider order
	total_results: int = 0  # provider's total count across all pages


@dataclass(frozen=True)
class Found:
	"""Positive lookup outcome carrying the parsed value (TitleRecord or SearchPage)."""
	value: Any


@dataclass(frozen=True)
class NotFound:
	"""Negative lookup outcome: the provider answered but has nothing for the request."""
	message: str


# A lookup either found something or reports why not; callers must handle both branches
LookupResult = Union[Found, NotFound]


@dataclass(frozen=True)
class TitleSummary:
	"""
	Compact view of a resolved title used by the ranking and recommendation pipelines.
	Only ever built from a successful, non-error lookup.
	"""
	title: str  # display title
	year: str  # release year text
	rating: str  # IMDb rating as text ("7.9", "N/A", ...)
	genres: str  # comma-separated genres
	director: str  # comma-separated directors, may be "N/A"
	synopsis: str  # short plot

	@classmethod
	def from_record(cls, record: TitleRecord) -> 'TitleSummary':
		"""Project a full lookup record onto the summary fields."""
		return cls(
			title=record.title,
			year=record.year,
			rating=record.imdb_rating,
			genres=record.genre,
			director=record.director,
			synopsis=record.plot,
		)


@dataclass(frozen=True)
class RecommendationTier:
	"""One labeled, independently ranked group of recommendations."""
	level: int  # 1 = genre, 2 = director, 3 = actors
	label: str  # human-readable description of the tier
	members: List[TitleSummary]  # ranked, deduplicated, bounded


@dataclass(frozen=True)
class GenreRanking:
	"""Top titles for a genre, best rated first."""
	genre: str  # genre the ranking was built for
	titles: List[TitleSummary]  # ranked titles
	total: int  # len(titles), kept for the API payload


@dataclass(frozen=True)
class Recommendations:
	"""Seed title plus every non-empty recommendation tier, most general first."""
	seed: TitleSummary  # the favorite title the tiers were derived from
	tiers: List[RecommendationTier]  # ordered by level
