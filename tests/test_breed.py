from __future__ import annotations

import pytest

from core.domain.breed import capitalize_words, extract_breed_name, format_breed_name


def test_two_word_breed_is_swapped_and_capitalized():
    assert format_breed_name("miniature-schnauzer") == "Schnauzer Miniature"
    assert format_breed_name("schnauzer-miniature") == "Miniature Schnauzer"


def test_single_word_breed_is_capitalized():
    assert format_breed_name("pug") == "Pug"


@pytest.mark.parametrize(
    ("breed", "expected"),
    [
        ("PUG", "Pug"),
        ("a-b-c", "A B C"),
        ("", ""),
        ("spaniel-cocker-english", "Spaniel Cocker English"),
    ],
)
def test_other_shapes_are_only_capitalized(breed, expected):
    assert format_breed_name(breed) == expected


def test_extract_breed_segment_after_breeds():
    url = "https://images.dog.ceo/breeds/hound-afghan/n02088094_1003.jpg"
    assert extract_breed_name(url) == "hound-afghan"


def test_extract_uses_first_breeds_component():
    assert extract_breed_name("https://x/breeds/pug/breeds/boxer.jpg") == "pug"


@pytest.mark.parametrize(
    "url",
    [
        "https://images.dog.ceo/pug/1.jpg",
        "https://images.dog.ceo/breeds",
        "Breed not found (master breed does not exist)",
    ],
)
def test_extract_returns_none_without_breed_segment(url):
    assert extract_breed_name(url) is None


def test_capitalize_words_keeps_spacing():
    assert capitalize_words("unknown  breed") == "Unknown  Breed"
    assert capitalize_words("Error loading breed") == "Error Loading Breed"
