import pytest

from app.intent import classify_facet, extract_intent, extract_place, title_case
from app.models import RequestedFacet


def test_trip_planning_sentence_defaults_to_places():
    intent = extract_intent("I'm going to go to Bangalore, let's plan my trip.")

    assert intent.place == "Bangalore"
    assert intent.facet == RequestedFacet.PLACES


@pytest.mark.parametrize(
    "text, expected",
    [
        ("temperature of Kolkata", "Kolkata"),
        ("Temperature of kolkata?", "Kolkata"),
        ("going to Paris, what's the weather", "Paris"),
        ("I am going to goa what places can I visit", "Goa"),
        ("What's the weather in New York?", "New York"),
        ("what can I see at agra, it looks nice", "Agra"),
        ("Tell me about Tokyo", "Tokyo"),
        ("show me San Francisco please", "San Francisco"),
        ("weather mumbai", "Mumbai"),
    ],
)
def test_extract_place(text, expected):
    assert extract_place(text) == expected


def test_curly_apostrophe_is_normalized():
    intent = extract_intent("I’m going to go to Jaipur, let’s plan my trip.")

    assert intent.place == "Jaipur"
    assert intent.facet == RequestedFacet.PLACES


def test_stop_word_candidate_falls_through_to_next_matcher():
    # "in the" is rejected, the capitalized scan then finds Delhi
    assert extract_place("I'm in the mood for Delhi") == "Delhi"


def test_nothing_usable_returns_empty_place():
    assert extract_place("is it to go") == ""
    assert extract_place("") == ""


@pytest.mark.parametrize(
    "text, facet",
    [
        ("What is the temperature in Kolkata?", RequestedFacet.WEATHER),
        ("will it rain in Pune", RequestedFacet.WEATHER),
        ("What places can I visit in Goa?", RequestedFacet.PLACES),
        ("weather and tourist attractions in Rome", RequestedFacet.ALL),
        ("Bangalore", RequestedFacet.PLACES),
        ("Is it rainy in Goa?", RequestedFacet.WEATHER),
        ("What are the temperatures in Paris?", RequestedFacet.WEATHER),
        ("weekly forecasts for Delhi", RequestedFacet.WEATHER),
        ("sightseeing and visiting Jaipur", RequestedFacet.PLACES),
        # keyword inside a longer word does not count
        ("temples near the hotel in Madurai", RequestedFacet.PLACES),
    ],
)
def test_classify_facet(text, facet):
    assert classify_facet(text) == facet


def test_title_case():
    assert title_case("nEW   yORK") == "New York"
