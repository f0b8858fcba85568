# app/intent.py
"""
Best-effort parsing of a free-text travel question into a place name and the
facet (weather, places or both) the user is asking about.

Place extraction is a cascade of independent matchers tried in order; the
first one that yields a candidate surviving `_clean_candidate` wins. This is
a heuristic pattern matcher, not a language model: when nothing fits, the
place comes back empty and the caller decides what to do with it.
"""
import logging
import re
from typing import Callable, List, NamedTuple, Optional

from .models import RequestedFacet

logger = logging.getLogger(__name__)

STOP_WORDS = frozenset({
    "i", "i'm", "i've", "let", "let's", "what", "the", "and", "are", "can", "is", "there",
    "my", "trip", "plan", "going", "to", "go", "temperature", "temp", "weather", "weather's",
    "of", "in", "at", "for", "from", "with", "will", "want", "need", "show", "tell", "give",
    "get", "find", "see", "visit", "travel",
})

# a candidate is cut at the first of these following its first word
TRAILING_WORDS = frozenset({
    "what", "let", "plan", "my", "trip", "and", "are", "can", "visit", "go",
    "is", "the", "there", "temperature", "places",
})

WEATHER_KEYWORDS = frozenset({
    "temperature", "temp", "weather", "rain", "raining", "precipitation", "forecast",
    "climate", "hot", "cold", "degrees", "celsius", "fahrenheit",
})

PLACES_KEYWORDS = frozenset({
    "places", "attractions", "visit", "see", "tourist", "sightseeing",
    "plan my trip", "plan trip", "let's plan", "where to go", "what to see",
    "what to visit", "can visit", "can go",
})

MIN_PLACE_LENGTH = 3

_TRAILING_PUNCT = re.compile(r"[,.?!;:]+$")
_TRAILING_WORDS_RE = re.compile(
    r"\s+(?:%s)\b.*$" % "|".join(sorted(TRAILING_WORDS)), re.IGNORECASE
)
_CAPITALIZED = re.compile(r"^[A-Z][a-z]+$")
_ALPHA = re.compile(r"^[a-zA-Z]+$")

_OF_PATTERN = re.compile(r"\b\w+\s+of\s+([a-zA-Z\s]+?)(?:\s*[,.?!]|$)", re.IGNORECASE)
_GOING_TO_PATTERN = re.compile(
    r"\bgoing\s+to\s+(?:go\s+to\s+)?([a-zA-Z\s]+?)(?:\s*[,.?!]|\s+let\b|$)", re.IGNORECASE
)
_IM_GOING_TO_PATTERN = re.compile(
    r"\b(?:i'?m|i\s+am)\s+going\s+to\s+(?:go\s+to\s+)?([a-zA-Z\s]+?)(?:\s*[,.?!]|\s+let\b|\s+what\b|$)",
    re.IGNORECASE,
)
_IN_AT_PATTERN = re.compile(r"\b(?:in|at)\s+([a-zA-Z\s]+?)(?:\s*[,.?!]|\s+it\b|$)", re.IGNORECASE)


class ParsedIntent(NamedTuple):
    place: str
    facet: RequestedFacet


def _keyword_pattern(keywords) -> re.Pattern:
    # longest first so multi-word phrases are tried before their parts;
    # inflections count ("rainy", "forecasts") but "hotel" and "temple" don't
    alternatives = sorted(keywords, key=len, reverse=True)
    return re.compile(
        r"\b(?:%s)(?:s|es|y|ing)?\b" % "|".join(re.escape(k) for k in alternatives)
    )


_WEATHER_RE = _keyword_pattern(WEATHER_KEYWORDS)
_PLACES_RE = _keyword_pattern(PLACES_KEYWORDS)


def normalize(text: str) -> str:
    text = text.replace("’", "'").replace("‘", "'")
    return " ".join(text.split())


def title_case(text: str) -> str:
    return " ".join(w[:1].upper() + w[1:].lower() for w in text.split())


def _strip_token(token: str) -> str:
    return _TRAILING_PUNCT.sub("", token)


def _clean_candidate(candidate: Optional[str]) -> Optional[str]:
    if not candidate:
        return None
    place = _TRAILING_PUNCT.sub("", candidate.strip()).strip()
    place = _TRAILING_WORDS_RE.sub("", place).strip()
    place = " ".join(place.split())
    if len(place) < MIN_PLACE_LENGTH:
        return None
    if place.split()[0].lower() in STOP_WORDS:
        return None
    return place


def _regex_matcher(pattern: re.Pattern) -> Callable[[str], Optional[str]]:
    def match(text: str) -> Optional[str]:
        m = pattern.search(text)
        return m.group(1) if m else None
    return match


def _capitalized_words(text: str) -> Optional[str]:
    words = [_strip_token(w) for w in text.split()]
    for i, word in enumerate(words):
        if word.lower() in STOP_WORDS:
            continue
        if len(word) > 2 and _CAPITALIZED.match(word):
            # two-word names such as "New York"
            if i + 1 < len(words):
                following = words[i + 1]
                if _CAPITALIZED.match(following) and following.lower() not in STOP_WORDS:
                    return f"{word} {following}"
            return word
    return None


def _any_word(text: str) -> Optional[str]:
    for word in (_strip_token(w) for w in text.split()):
        if len(word) >= MIN_PLACE_LENGTH and _ALPHA.match(word) and word.lower() not in STOP_WORDS:
            return word
    return None


PLACE_MATCHERS: List[Callable[[str], Optional[str]]] = [
    _regex_matcher(_OF_PATTERN),
    _regex_matcher(_GOING_TO_PATTERN),
    _regex_matcher(_IM_GOING_TO_PATTERN),
    _regex_matcher(_IN_AT_PATTERN),
    _capitalized_words,
    _any_word,
]


def extract_place(text: str) -> str:
    """Return the title-cased place name found in `text`, or ""."""
    text = normalize(text)
    for matcher in PLACE_MATCHERS:
        place = _clean_candidate(matcher(text))
        if place:
            return title_case(place)
    return ""


def classify_facet(text: str) -> RequestedFacet:
    lowered = normalize(text).lower()
    wants_weather = bool(_WEATHER_RE.search(lowered))
    wants_places = bool(_PLACES_RE.search(lowered))

    if wants_weather and wants_places:
        return RequestedFacet.ALL
    if wants_weather:
        return RequestedFacet.WEATHER
    # "let's plan my trip" with no weather words still means sightseeing
    return RequestedFacet.PLACES


def extract_intent(text: str) -> ParsedIntent:
    intent = ParsedIntent(place=extract_place(text), facet=classify_facet(text))
    logger.debug(f"Parsed {text!r} -> place={intent.place!r}, facet={intent.facet.value}")
    return intent
