"""
OMDb client module.
Issues single-title lookups, episode lookups, and free-text searches against the provider,
and turns its payloads into typed records and tagged Found/NotFound results.
"""

# Standard typing helpers for payload handling
from typing import Dict, List, Optional  # type hints

# HTTP client for the provider's REST endpoint
import requests  # outbound calls

# Console logging
from loguru import logger  # console logger

# Project types
from .errors import UpstreamResponseError, UpstreamTimeoutError, UpstreamTransportError
from .models import Found, LookupResult, NotFound, RatingSource, SearchHit, SearchPage, TitleRecord


class OMDbClient:
	"""
	Thin client over the OMDb REST API.
	Each public call performs exactly one HTTP request; "not found" comes back as NotFound,
	while transport and payload problems raise UpstreamError subclasses.
	"""

	# Provider JSON key -> TitleRecord attribute
	RECORD_FIELDS = {
		'Title': 'title',
		'Year': 'year',
		'Rated': 'rated',
		'Released': 'released',
		'Runtime': 'runtime',
		'Genre': 'genre',
		'Director': 'director',
		'Writer': 'writer',
		'Actors': 'actors',
		'Plot': 'plot',
		'Language': 'language',
		'Country': 'country',
		'Awards': 'awards',
		'Poster': 'poster',
		'Metascore': 'metascore',
		'imdbRating': 'imdb_rating',
		'imdbVotes': 'imdb_votes',
		'imdbID': 'imdb_id',
		'Type': 'type',
		'Season': 'season',
		'Episode': 'episode',
	}

	def __init__(
		self,
		api_key: str,  # provider API key
		base_url: str = 'http://www.omdbapi.com/',  # provider endpoint
		timeout: float = 10.0,  # seconds per request
		session: Optional[requests.Session] = None,  # injectable transport
	):
		self.api_key = api_key  # sent as "apikey" on every call
		self.base_url = base_url  # single endpoint, behavior chosen by params
		self.timeout = timeout  # applied to connect and read
		self.session = session or requests.Session()  # reuse connections across calls

	@classmethod
	def from_settings(cls, settings, session: Optional[requests.Session] = None) -> 'OMDbClient':
		"""Build a client from a Settings instance."""
		return cls(
			api_key=settings.omdb_api_key,
			base_url=settings.omdb_base_url,
			timeout=settings.request_timeout,
			session=session,
		)

	def get_title(self, title: str) -> LookupResult:
		"""Look up one movie by exact title."""
		payload = self._request({'t': title, 'type': 'movie'})
		return self._to_record_result(payload)

	def get_episode(self, series_title: str, season: int, episode: int) -> LookupResult:
		"""Look up one episode of a series by season and episode number."""
		payload = self._request({'t': series_title, 'Season': str(season), 'Episode': str(episode)})
		return self._to_record_result(payload)

	def search(self, term: str) -> LookupResult:
		"""Free-text movie search; a successful result wraps a SearchPage."""
		payload = self._request({'s': term, 'type': 'movie'})
		if not self._is_success(payload):
			return NotFound(message=self._error_message(payload))

		raw_hits = payload.get('Search') or []
		if not isinstance(raw_hits, list):
			raise UpstreamResponseError(f"Search results for '{term}' are not a list")

		hits: List[SearchHit] = []
		for raw in raw_hits:
			if not isinstance(raw, dict):
				raise UpstreamResponseError(f"Malformed search hit for '{term}': {raw!r}")
			hits.append(SearchHit(
				title=self._text(raw, 'Title'),
				year=self._text(raw, 'Year'),
				identifier=self._text(raw, 'imdbID'),
				kind=self._text(raw, 'Type'),
			))

		total = self._text(payload, 'totalResults')
		page = SearchPage(hits=hits, total_results=int(total) if total.isdigit() else len(hits))
		logger.debug(f"[OMDb] search '{term}' -> {len(hits)} hits (total {page.total_results})")
		return Found(value=page)

	def _request(self, params: Dict[str, str]) -> Dict:
		"""Perform one GET and return the decoded JSON object."""
		query = dict(params)
		query['apikey'] = self.api_key
		try:
			response = self.session.get(self.base_url, params=query, timeout=self.timeout)
			response.raise_for_status()
		except requests.Timeout as e:
			raise UpstreamTimeoutError(f"OMDb request timed out after {self.timeout}s: {params}") from e
		except requests.RequestException as e:
			raise UpstreamTransportError(f"failed to make request: {e}") from e

		try:
			payload = response.json()
		except ValueError as e:
			raise UpstreamResponseError(f"failed to parse response: {e}") from e

		if not isinstance(payload, dict) or payload.get('Response') not in ('True', 'False'):
			raise UpstreamResponseError(f"unexpected payload shape for {params}")
		return payload

	def _to_record_result(self, payload: Dict) -> LookupResult:
		if not self._is_success(payload):
			return NotFound(message=self._error_message(payload))
		return Found(value=self._parse_record(payload))

	def _parse_record(self, payload: Dict) -> TitleRecord:
		"""Convert a successful lookup payload into a TitleRecord."""
		values = {attr: self._text(payload, key) for key, attr in self.RECORD_FIELDS.items()}

		raw_ratings = payload.get('Ratings') or []
		if not isinstance(raw_ratings, list):
			raise UpstreamResponseError("Ratings field is not a list")
		ratings = [
			RatingSource(source=self._text(r, 'Source'), value=self._text(r, 'Value'))
			for r in raw_ratings
			if isinstance(r, dict)
		]
		return TitleRecord(ratings=ratings, **values)

	@staticmethod
	def _is_success(payload: Dict) -> bool:
		return payload.get('Response') == 'True'

	@staticmethod
	def _error_message(payload: Dict) -> str:
		return str(payload.get('Error') or 'Not found')

	@staticmethod
	def _text(payload: Dict, key: str) -> str:
		value = payload.get(key)
		if value is None:
			return ''
		if isinstance(value, (dict, list)):
			raise UpstreamResponseError(f"Field '{key}' should be text, got {type(value).__name__}")
		return str(value).strip()
