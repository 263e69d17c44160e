"""Short title and one-sentence idea for a plan."""
from __future__ import annotations

from schemas import GenerationOptions, Summary

MAX_TITLE_WORDS = 8

_SMALL_WORDS = {
    "a", "an", "the", "and", "but", "or", "nor", "of", "in", "on", "at", "to",
    "for", "by", "with", "from", "into", "over", "through", "as", "via",
}
_TRAILING_PUNCT = ".,;:!?-–— "


def make_title(topic: str) -> str:
    """Title-cased fragment of *topic*, at most ``MAX_TITLE_WORDS`` words.

    The leading article is dropped and a truncated fragment never ends on a
    connector word ("... Through"). Words keep their inner casing, so acronyms
    such as "NASA" survive.
    """
    words = topic.split()
    if len(words) > 1 and words[0].lower() in {"a", "an", "the"}:
        words = words[1:]
    words = words[:MAX_TITLE_WORDS]
    while len(words) > 1 and words[-1].lower().strip(_TRAILING_PUNCT) in _SMALL_WORDS:
        words.pop()

    titled = []
    for pos, word in enumerate(words):
        if pos > 0 and word.lower() in _SMALL_WORDS:
            titled.append(word.lower())
        else:
            titled.append(word[:1].upper() + word[1:])
    return " ".join(titled).strip(_TRAILING_PUNCT) or topic


def indefinite_article(word: str) -> str:
    return "an" if word[:1].lower() in ("a", "e", "i", "o", "u") else "a"


def make_idea(options: GenerationOptions) -> str:
    """One sentence containing the topic verbatim.

    A topic that ends in punctuation ("Why do cats purr?") is quoted rather
    than trimmed.
    """
    topic = options.topic
    lead = f'"{topic}"' if topic[-1] in _TRAILING_PUNCT else f"{topic},"
    return (
        f"{lead} told as {indefinite_article(options.mood)} {options.mood}, "
        f"{options.tone} {options.visual_style.value} video."
    )


def build_summary(options: GenerationOptions) -> Summary:
    return Summary(
        title=make_title(options.topic),
        idea=make_idea(options),
        mood=options.mood,
        tone=options.tone,
        visual_style=options.visual_style,
    )
