"""
Ranking module.
Canonical identity, rating validation, deduplication, and rating-ordered truncation of titles.
"""

import math
from typing import Iterable, List, Optional

from .models import NOT_AVAILABLE, TitleSummary


def parse_rating(value: Optional[str]) -> Optional[float]:
	"""
	Parse a rating given as text ("7.9").
	Returns None for empty, "N/A", non-numeric or non-finite values; never raises.
	"""
	if value is None:
		return None
	text = str(value).strip()
	if not text or text.upper() == NOT_AVAILABLE:
		return None
	try:
		rating = float(text)
	except ValueError:
		return None
	if not math.isfinite(rating):
		return None
	return rating


def has_valid_rating(item: TitleSummary) -> bool:
	rating = parse_rating(item.rating)
	return rating is not None and rating > 0


def canonical_key(item: TitleSummary) -> str:
	"""Identity used for dedup: lowercase title followed by lowercase year."""
	return item.title.lower() + item.year.lower()


def matches_genre(item: TitleSummary, genre: str) -> bool:
	return genre.lower() in item.genres.lower()


def sort_by_rating(items: Iterable[TitleSummary]) -> List[TitleSummary]:
	"""
	Stable sort, best rated first.
	Expects items that already passed has_valid_rating.
	"""
	return sorted(items, key=lambda item: parse_rating(item.rating), reverse=True)


def filter_and_dedup(items: Iterable[TitleSummary], genre: str) -> List[TitleSummary]:
	"""
	Keep items in the genre with a positive rating, first occurrence of each identity wins.
	Input order is preserved; no sorting happens here.
	"""
	seen = set()
	unique: List[TitleSummary] = []
	for item in items:
		key = canonical_key(item)
		if key in seen:
			continue
		if not matches_genre(item, genre) or not has_valid_rating(item):
			continue
		seen.add(key)
		unique.append(item)
	return unique


def dedup_and_bound(items: Iterable[TitleSummary], limit: int) -> List[TitleSummary]:
	"""
	Drop invalid ratings, sort best first, dedup by identity, and keep at most `limit` items.
	"""
	if limit <= 0:
		return []

	seen = set()
	unique: List[TitleSummary] = []
	for item in sort_by_rating(i for i in items if has_valid_rating(i)):
		key = canonical_key(item)
		if key in seen:
			continue
		seen.add(key)
		unique.append(item)
		if len(unique) >= limit:
			break
	return unique
