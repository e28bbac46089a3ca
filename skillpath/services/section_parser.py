"""Resume and job-description segmentation into tagged line segments."""

import re
from dataclasses import dataclass

# Section header patterns and their canonical names. Order matters: the first
# section whose pattern matches a header line wins, so the more specific
# "preferred qualifications" is listed before the generic "qualifications".
SECTION_PATTERNS: dict[str, list[str]] = {
    "nice_to_have": [
        r"nice[\s-]+to[\s-]+haves?",
        r"good[\s-]+to[\s-]+have",
        r"preferred(?:\s+(?:qualifications|skills|experience|requirements))?",
        r"bonus(?:\s+points)?",
        r"(?:pluses|a\s+plus|optional)",
    ],
    "requirements": [
        r"(?:minimum|basic|required|key)?\s*(?:requirements|qualifications)",
        r"must[\s-]+haves?",
        r"required(?:\s+skills)?",
        r"what\s+you(?:'|’)?ll\s+need",
        r"what\s+we(?:'|’)?re\s+looking\s+for",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills(?:\s*(?:&|and)\s*(?:tools|technologies))?",
        r"(?:technical|core)?\s*(?:competencies|proficiencies|expertise)",
        r"technologies",
        r"(?:tech(?:nical)?\s+)?(?:stack|toolkit|tooling)",
        r"(?:programming\s+)?languages",
    ],
    "responsibilities": [
        r"(?:key\s+)?responsibilities",
        r"what\s+you(?:'|’)?ll\s+do",
        r"duties",
        r"the\s+role",
    ],
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"career\s*(?:history|summary)",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications)",
    ],
    "summary": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"about\s*me",
    ],
    "projects": [
        r"(?:key|notable|selected|personal)?\s*projects",
        r"portfolio",
    ],
    "certifications": [
        r"certific(?:ations?|ates?)",
        r"licen[sc]es?\s*(?:&|and)?\s*certific(?:ations?|ates?)",
    ],
    "benefits": [
        r"benefits",
        r"perks",
        r"what\s+we\s+offer",
    ],
}

DEFAULT_SECTION = "other"

# Longer lines (or inline labels) are content, never headers
MAX_HEADER_LENGTH = 80

# Sections whose content lists the person's or the job's skills outright
SKILL_LIST_SECTIONS = frozenset({"skills"})

# Sections that list requirements one per line
REQUIREMENT_LIST_SECTIONS = frozenset({"requirements", "nice_to_have"})

# Markdown/bullet decoration allowed around a header
_DECOR = r"[\s#*_=>|•-]*"

_HEADER_ONLY: dict[str, re.Pattern] = {}
_HEADER_INLINE: dict[str, re.Pattern] = {}
for _section, _patterns in SECTION_PATTERNS.items():
    _combined = "|".join(_patterns)
    _HEADER_ONLY[_section] = re.compile(
        rf"^{_DECOR}(?:{_combined}){_DECOR}:?{_DECOR}$", re.IGNORECASE
    )
    _HEADER_INLINE[_section] = re.compile(
        rf"^{_DECOR}(?:{_combined})\s*[*_]*\s*:\s*(?P<content>\S.*)$", re.IGNORECASE
    )


@dataclass(frozen=True)
class Segment:
    """One line of content and the section it belongs to.

    ``start`` is the absolute offset of ``text`` in the source document, so
    ``source[start:start + len(text)] == text``.
    """

    text: str
    start: int
    line: int
    section: str


def detect_header(line: str) -> tuple[str, int] | None:
    """Return (section, content offset) if ``line`` is a section header.

    A stand-alone header ("Skills:") has no content and returns
    ``len(line)``; an inline header ("Skills: Python, Go") returns the
    offset where its content starts.
    """
    stripped = line.strip()
    if not stripped:
        return None
    if len(stripped) <= MAX_HEADER_LENGTH:
        for section, pattern in _HEADER_ONLY.items():
            if pattern.match(stripped):
                return section, len(line)

    # Patterns only ever see the indent-free text, and only when the part
    # before the first colon is header-sized, so matching stays bounded.
    indent = len(line) - len(line.lstrip())
    body = line[indent:]
    label, colon, _ = body.partition(":")
    if not colon or len(label) > MAX_HEADER_LENGTH:
        return None
    for section, pattern in _HEADER_INLINE.items():
        match = pattern.match(body)
        if match:
            return section, indent + match.start("content")
    return None


def segment(text: str) -> list[Segment]:
    """Split text into non-empty line segments tagged with their section."""
    segments: list[Segment] = []
    current = DEFAULT_SECTION
    offset = 0

    for line_no, raw_line in enumerate((text or "").splitlines(keepends=True), start=1):
        line = raw_line.rstrip("\r\n")
        line_start = offset
        offset += len(raw_line)

        header = detect_header(line)
        content_offset = 0
        if header is not None:
            current, content_offset = header

        content = line[content_offset:]
        if content.strip():
            segments.append(Segment(content, line_start + content_offset, line_no, current))

    return segments


def parse_sections(text: str) -> dict[str, str]:
    """Group segment text by section name, in order of first appearance."""
    grouped: dict[str, list[str]] = {}
    for seg in segment(text):
        grouped.setdefault(seg.section, []).append(seg.text.strip())
    return {section: "\n".join(lines) for section, lines in grouped.items()}
