"""
Shared fixtures: an in-memory stand-in for the OMDb endpoint.
FakeOMDb answers requests.Session.get calls from canned titles and searches,
records every call, and can inject transport failures per title or term.
"""

import threading

import pytest
import requests

from movie_api.omdb_client import OMDbClient


class FakeResponse:
	"""Minimal requests.Response look-alike."""

	def __init__(self, payload, status_code=200):
		self.payload = payload
		self.status_code = status_code

	def raise_for_status(self):
		if self.status_code >= 400:
			raise requests.HTTPError(f"{self.status_code} Error")

	def json(self):
		if isinstance(self.payload, Exception):
			raise self.payload
		return self.payload


def make_record(title, year='2000', rating='7.0', genre='Comedy', director='Jane Doe',
		actors='Actor One, Actor Two, Actor Three', plot='A plot.', **extra):
	"""OMDb-style lookup payload for one title."""
	record = {
		'Title': title,
		'Year': year,
		'Rated': 'PG-13',
		'Released': f'01 Jan {year}',
		'Runtime': '100 min',
		'Genre': genre,
		'Director': director,
		'Writer': 'Some Writer',
		'Actors': actors,
		'Plot': plot,
		'Language': 'English',
		'Country': 'United States',
		'Awards': 'N/A',
		'Poster': 'N/A',
		'Ratings': [{'Source': 'Internet Movie Database', 'Value': f'{rating}/10'}],
		'Metascore': 'N/A',
		'imdbRating': rating,
		'imdbVotes': '1,000',
		'imdbID': f'tt{len(title):07d}',
		'Type': 'movie',
		'Response': 'True',
	}
	record.update(extra)
	return record


class FakeOMDb:
	"""Routes OMDb query parameters to canned payloads."""

	def __init__(self):
		self.titles = {}  # lowercase title -> payload
		self.episodes = {}  # (lowercase series, season, episode) -> payload
		self.searches = {}  # search term -> list of (title, year)
		self.errors = {}  # ('t' | 's', value) -> exception raised by get()
		self.raw = {}  # ('t' | 's', value) -> FakeResponse served as-is
		self.calls = []  # every params dict received
		self._lock = threading.Lock()

	def add_title(self, title, **fields):
		record = make_record(title, **fields)
		self.titles[title.lower()] = record
		return record

	def add_search(self, term, titles):
		"""Register search hits; entries are titles or (title, year) pairs."""
		hits = []
		for entry in titles:
			title, year = entry if isinstance(entry, tuple) else (entry, '2000')
			hits.append((title, year))
		self.searches[term] = hits

	def searched_terms(self):
		return [c['s'] for c in self.calls if 's' in c]

	def looked_up_titles(self):
		return [c['t'] for c in self.calls if 't' in c and 'Season' not in c]

	def get(self, url, params=None, timeout=None):
		params = dict(params or {})
		with self._lock:
			self.calls.append(params)

		kind, value = ('s', params['s']) if 's' in params else ('t', params.get('t', ''))
		if (kind, value) in self.errors:
			raise self.errors[(kind, value)]
		if (kind, value) in self.raw:
			return self.raw[(kind, value)]

		if kind == 's':
			hits = self.searches.get(value)
			if not hits:
				return FakeResponse({'Response': 'False', 'Error': 'Movie not found!'})
			return FakeResponse({
				'Search': [
					{'Title': t, 'Year': y, 'imdbID': f'tt{i:07d}', 'Type': 'movie', 'Poster': 'N/A'}
					for i, (t, y) in enumerate(hits)
				],
				'totalResults': str(len(hits)),
				'Response': 'True',
			})

		if 'Season' in params:
			key = (value.lower(), params['Season'], params['Episode'])
			payload = self.episodes.get(key)
		else:
			payload = self.titles.get(value.lower())
		if payload is None:
			return FakeResponse({'Response': 'False', 'Error': 'Movie not found!'})
		return FakeResponse(payload)


@pytest.fixture
def upstream():
	return FakeOMDb()


@pytest.fixture
def client(upstream):
	return OMDbClient('test-key', base_url='http://omdb.test/', timeout=2.0, session=upstream)
