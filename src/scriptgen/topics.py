"""Topic extraction from generated scripts."""

import re

MAX_TOPICS = 20
MAX_FALLBACK_PARAGRAPHS = 6
MAX_FALLBACK_LENGTH = 90

_HEADING = re.compile(r"^#{1,6}\s+")
_NUMBERED = re.compile(r"^\d+[.)]\s+")
_LABELED = re.compile(
    r"^(topic|t[óo]pico|section|se[cç][aã]o|chapter|cap[íi]tulo|part|parte)\s*[:\-]\s+",
    re.IGNORECASE,
)
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_SENTENCE_END = re.compile(r"[.!?]")


def extract_topics(script: str) -> list[str]:
    """Extract an ordered list of section titles from a script.

    Lines are matched, in priority order, as markdown headings, numbered
    items, or lines labeled "Topic:", "Section:", "Chapter:" or "Part:".
    If no line matches, the first sentence of each of the first six
    paragraphs is used instead. Titles of three characters or fewer are
    ignored, duplicates are dropped, and at most MAX_TOPICS are returned.

    Args:
        script: Generated script text.

    Returns:
        Topic titles in order of appearance.
    """
    if not script:
        return []

    topics: list[str] = []
    seen: set[str] = set()

    def add(title: str) -> None:
        title = title.strip()
        if len(title) > 3 and title not in seen:
            topics.append(title)
            seen.add(title)

    for raw in script.splitlines():
        line = raw.strip()
        if not line:
            continue
        for pattern in (_HEADING, _NUMBERED, _LABELED):
            if pattern.match(line):
                add(pattern.sub("", line, count=1))
                break

    if not topics:
        paragraphs = [p.strip() for p in _PARAGRAPH_BREAK.split(script) if p.strip()]
        for paragraph in paragraphs[:MAX_FALLBACK_PARAGRAPHS]:
            sentence = _SENTENCE_END.split(paragraph, maxsplit=1)[0]
            add(sentence[:MAX_FALLBACK_LENGTH])

    return topics[:MAX_TOPICS]
