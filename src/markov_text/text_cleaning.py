from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

import regex  # type: ignore


_NEWLINE_RE = re.compile(r"\r\n?")
# Control characters other than the line break.
_CONTROL_RE = re.compile(r"[\x00-\x09\x0B-\x1F\x7F]")


@dataclass(frozen=True)
class CorpusCleanConfig:
    lowercase: bool = False
    strip_accents: bool = False
    normalize_newlines: bool = True
    expand_tabs: bool = True
    strip_control: bool = True


def clean_corpus(text: str, config: CorpusCleanConfig | None = None) -> str:
    """Normalize a corpus before building a chain from it.

    Line breaks are kept as they are (apart from turning CR/CRLF into LF),
    since they delimit chains. Everything else that would glue odd bytes onto
    words is turned into plain spaces.
    """

    cfg = config or CorpusCleanConfig()
    s = text

    if cfg.normalize_newlines:
        s = _NEWLINE_RE.sub("\n", s)

    if cfg.lowercase:
        s = s.lower()

    if cfg.strip_accents:
        # Decompose, then drop the combining marks.
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))

    if cfg.expand_tabs:
        s = s.replace("\t", " ")

    if cfg.strip_control:
        s = _CONTROL_RE.sub(" ", s)

    return s
