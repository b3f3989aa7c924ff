"""
Unit tests for OMDbClient: request parameters, record parsing, and error classification.
"""

import pytest
import requests

from movie_api.errors import UpstreamResponseError, UpstreamTimeoutError, UpstreamTransportError
from movie_api.models import Found, NotFound, SearchPage, TitleRecord

from conftest import FakeResponse


def test_get_title_parses_record(client, upstream):
	upstream.add_title('Inception', year='2010', rating='8.8', genre='Action, Adventure, Sci-Fi',
		director='Christopher Nolan', actors='Leonardo DiCaprio, Joseph Gordon-Levitt, Elliot Page')

	result = client.get_title('Inception')

	assert isinstance(result, Found)
	record = result.value
	assert isinstance(record, TitleRecord)
	assert record.title == 'Inception'
	assert record.year == '2010'
	assert record.imdb_rating == '8.8'
	assert record.genre == 'Action, Adventure, Sci-Fi'
	assert record.director == 'Christopher Nolan'
	assert record.country == 'United States'
	assert record.ratings[0].source == 'Internet Movie Database'
	assert record.ratings[0].value == '8.8/10'


def test_get_title_sends_key_title_and_type(client, upstream):
	client.get_title('Heat')
	assert upstream.calls == [{'t': 'Heat', 'type': 'movie', 'apikey': 'test-key'}]


def test_get_title_not_found_is_a_value(client):
	result = client.get_title('No Such Movie')
	assert isinstance(result, NotFound)
	assert result.message == 'Movie not found!'


def test_get_episode_params_and_fields(client, upstream):
	upstream.episodes[('breaking bad', '1', '2')] = {
		'Title': "Cat's in the Bag...", 'Year': '2008', 'Season': '1', 'Episode': '2',
		'Director': 'Adam Bernstein', 'Actors': 'Bryan Cranston, Anna Gunn', 'imdbRating': '8.6',
		'Plot': 'Walt and Jesse clean up.', 'Type': 'episode', 'Response': 'True',
	}

	result = client.get_episode('Breaking Bad', 1, 2)

	assert upstream.calls[-1] == {'t': 'Breaking Bad', 'Season': '1', 'Episode': '2', 'apikey': 'test-key'}
	assert isinstance(result, Found)
	assert result.value.season == '1'
	assert result.value.episode == '2'
	assert result.value.ratings == []


def test_search_returns_page_of_hits(client, upstream):
	upstream.add_search('matrix', [('The Matrix', '1999'), ('The Matrix Reloaded', '2003')])

	result = client.search('matrix')

	assert isinstance(result, Found)
	page = result.value
	assert isinstance(page, SearchPage)
	assert [h.title for h in page.hits] == ['The Matrix', 'The Matrix Reloaded']
	assert page.hits[0].year == '1999'
	assert page.hits[0].identifier == 'tt0000000'
	assert page.hits[0].kind == 'movie'
	assert page.total_results == 2
	assert upstream.calls[-1] == {'s': 'matrix', 'type': 'movie', 'apikey': 'test-key'}


def test_search_without_results_is_not_found(client):
	result = client.search('zzzzzz')
	assert isinstance(result, NotFound)


def test_connection_error_is_transport_error(client, upstream):
	upstream.errors[('t', 'Heat')] = requests.ConnectionError('connection refused')
	with pytest.raises(UpstreamTransportError):
		client.get_title('Heat')


def test_timeout_is_classified_separately(client, upstream):
	upstream.errors[('s', 'slow')] = requests.Timeout('read timed out')
	with pytest.raises(UpstreamTimeoutError):
		client.search('slow')


def test_http_error_status_is_transport_error(client, upstream):
	upstream.raw[('t', 'Heat')] = FakeResponse({'Response': 'False', 'Error': 'Invalid API key!'}, status_code=401)
	with pytest.raises(UpstreamTransportError):
		client.get_title('Heat')


def test_invalid_json_is_response_error(client, upstream):
	upstream.raw[('t', 'Heat')] = FakeResponse(ValueError('Expecting value'))
	with pytest.raises(UpstreamResponseError):
		client.get_title('Heat')


@pytest.mark.parametrize('payload', [
	['not', 'an', 'object'],
	{'Title': 'Heat'},
	{'Response': 'maybe'},
])
def test_unexpected_payload_shape_is_response_error(client, upstream, payload):
	upstream.raw[('t', 'Heat')] = FakeResponse(payload)
	with pytest.raises(UpstreamResponseError):
		client.get_title('Heat')


def test_search_hits_must_be_a_list(client, upstream):
	upstream.raw[('s', 'odd')] = FakeResponse({'Response': 'True', 'Search': {'Title': 'x'}})
	with pytest.raises(UpstreamResponseError):
		client.search('odd')
