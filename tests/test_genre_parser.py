"""
Unit tests for GenreNormalizer: synonyms, exact labels, fuzzy matching, and pass-through.
"""

import pytest

from movie_api.genre_parser import GenreNormalizer


@pytest.fixture(scope='module')
def normalizer():
	return GenreNormalizer()


@pytest.mark.parametrize('raw, expected', [
	('sci-fi', 'Sci-Fi'),
	('Science Fiction', 'Sci-Fi'),
	('scifi', 'Sci-Fi'),
	('funny', 'Comedy'),
	('romantic', 'Romance'),
	('sports', 'Sport'),
	('film   noir', 'Film-Noir'),
])
def test_synonyms(normalizer, raw, expected):
	assert normalizer.normalize(raw) == expected


@pytest.mark.parametrize('raw, expected', [
	('comedy', 'Comedy'),
	('  HORROR ', 'Horror'),
	('Western', 'Western'),
])
def test_exact_labels_are_case_insensitive(normalizer, raw, expected):
	assert normalizer.normalize(raw) == expected


@pytest.mark.parametrize('raw, expected', [
	('horor', 'Horror'),
	('thriler', 'Thriller'),
	('comdy', 'Comedy'),
])
def test_fuzzy_typos(normalizer, raw, expected):
	assert normalizer.normalize(raw) == expected


def test_unknown_genre_passes_through(normalizer):
	assert normalizer.normalize('  Cyberpunk ') == 'Cyberpunk'


def test_extra_synonyms():
	assert GenreNormalizer({'kaiju': 'Sci-Fi'}).normalize('Kaiju') == 'Sci-Fi'


@pytest.mark.parametrize('raw', ['', '   '])
def test_empty_genre_is_rejected(normalizer, raw):
	with pytest.raises(ValueError):
		normalizer.normalize(raw)
