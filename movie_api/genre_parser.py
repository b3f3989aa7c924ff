"""
Genre name normalization.
Maps free-form user input ("scifi", "funny", "horor") onto the genre labels the provider uses,
so the substring genre filter downstream has a chance to match.
"""

import re  # whitespace cleanup
from typing import Dict, List, Optional  # type annotations

from rapidfuzz import fuzz, process  # fuzzy matching utilities

from loguru import logger  # console logging


class GenreNormalizer:
	"""
	Resolves a raw genre string through synonyms, exact label matches, then fuzzy matching.
	Unknown genres pass through unchanged so the provider can still be asked about them.
	"""

	# Genre labels as they appear in the provider's "Genre" field
	KNOWN_GENRES: List[str] = [
		'Action', 'Adventure', 'Animation', 'Biography', 'Comedy', 'Crime',
		'Documentary', 'Drama', 'Family', 'Fantasy', 'Film-Noir', 'History',
		'Horror', 'Music', 'Musical', 'Mystery', 'Romance', 'Sci-Fi', 'Short',
		'Sport', 'Thriller', 'War', 'Western',
	]

	# Common user phrasings -> provider label
	GENRE_SYNONYMS: Dict[str, str] = {
		'sci-fi': 'Sci-Fi',
		'sci fi': 'Sci-Fi',
		'scifi': 'Sci-Fi',
		'sci-fy': 'Sci-Fi',
		'science fiction': 'Sci-Fi',
		'science-fiction': 'Sci-Fi',
		'funny': 'Comedy',
		'comedies': 'Comedy',
		'romantic': 'Romance',
		'romcom': 'Romance',
		'animated': 'Animation',
		'cartoon': 'Animation',
		'biographical': 'Biography',
		'biopic': 'Biography',
		'sports': 'Sport',
		'historical': 'History',
		'film noir': 'Film-Noir',
		'noir': 'Film-Noir',
		'scary': 'Horror',
		'documentaries': 'Documentary',
		'westerns': 'Western',
		'thrillers': 'Thriller',
		'musicals': 'Musical',
	}

	FUZZY_THRESHOLD = 88

	def __init__(self, extra_synonyms: Optional[Dict[str, str]] = None):
		self.synonyms = {k.lower(): v for k, v in self.GENRE_SYNONYMS.items()}
		self.synonyms.update({k.lower(): v for k, v in (extra_synonyms or {}).items()})
		self._labels = {g.lower(): g for g in self.KNOWN_GENRES}
		self._choices = list(self._labels)

	def normalize(self, raw: str) -> str:
		"""Return the provider label for `raw`, or the trimmed input when nothing matches."""
		if not raw or not raw.strip():
			raise ValueError("Genre cannot be empty")

		cleaned = re.sub(r"\s+", " ", raw.strip())
		key = cleaned.lower()

		if key in self.synonyms:
			logger.debug("[Genre] Synonym match: '{}' -> '{}'", cleaned, self.synonyms[key])
			return self.synonyms[key]

		if key in self._labels:
			return self._labels[key]

		match = process.extractOne(key, self._choices, scorer=fuzz.ratio)
		if match and match[1] >= self.FUZZY_THRESHOLD:
			logger.debug("[Genre] Fuzzy match: '{}' -> '{}' (score={:.0f})", cleaned, self._labels[match[0]], match[1])
			return self._labels[match[0]]

		logger.debug("[Genre] No known label for '{}', passing through", cleaned)
		return cleaned
