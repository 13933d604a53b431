"""Lexical similarity heuristic for research topic and skill labels.

Scores how close two free-text labels are on a 0.0-1.0 scale using a fixed
ladder of rules. The first rule that matches wins:

1. Exact match (case-insensitive, trimmed)          -> 1.0
2. Substring containment in either direction        -> 0.9
3. Shared whitespace-separated words                -> 0.7-0.9
4. Same curated synonym cluster                     -> 0.85 / 0.75
5. Nothing in common                                -> 0.0

This is deliberately cheap: no stemming, no embeddings.
"""

import re
from typing import Any

EXACT_SCORE = 1.0
CONTAINMENT_SCORE = 0.9
TOKEN_OVERLAP_BASE = 0.7
TOKEN_OVERLAP_SPAN = 0.2
CLUSTER_SCORE = 0.85
RELATED_FRAGMENT_SCORE = 0.75

# Raw-substring cluster hits ignore short abbreviations ("ai", "cs", "r")
MIN_FRAGMENT_LENGTH = 4

SYNONYM_CLUSTERS: dict[str, list[str]] = {
    # Computer science
    "artificial intelligence": [
        "ai",
        "machine learning",
        "deep learning",
        "neural networks",
        "intelligent systems",
    ],
    "machine learning": [
        "ml",
        "ai",
        "artificial intelligence",
        "data science",
        "deep learning",
        "pattern recognition",
    ],
    "computer science": ["cs", "computing", "software engineering", "algorithms"],
    "data science": [
        "analytics",
        "statistics",
        "machine learning",
        "big data",
        "data analysis",
    ],
    "computer vision": ["image processing", "image recognition", "visual computing"],
    "natural language processing": [
        "nlp",
        "computational linguistics",
        "language models",
        "text mining",
    ],
    "cybersecurity": ["security", "cryptography", "network security", "privacy"],
    "human-computer interaction": [
        "hci",
        "user experience",
        "usability",
        "interaction design",
    ],
    # Engineering
    "robotics": ["autonomous systems", "mechatronics", "control systems"],
    "engineering": ["mechanical", "electrical", "civil", "biomedical"],
    "biomedical engineering": [
        "bioengineering",
        "medical devices",
        "biomechanics",
        "tissue engineering",
    ],
    "materials science": ["materials engineering", "nanotechnology", "polymers"],
    "environmental engineering": [
        "environmental science",
        "climate change",
        "sustainability",
        "renewable energy",
    ],
    # Biology
    "biology": ["biological", "life sciences", "biotechnology"],
    "genetics": ["genomics", "bioinformatics", "molecular biology", "gene expression"],
    "neuroscience": ["neural", "brain", "cognitive science", "neuropsychology"],
    "cancer research": ["oncology", "tumor biology", "cancer biology"],
    "chemistry": ["biochemistry", "chemical engineering", "materials science"],
    # Physics
    "physics": ["quantum", "theoretical physics", "applied physics"],
    "quantum computing": ["quantum information", "quantum algorithms", "qubits"],
    "astrophysics": ["astronomy", "cosmology", "space science"],
    # Psychology and social science
    "psychology": [
        "behavioral psychology",
        "cognitive psychology",
        "behavioral science",
        "mental health",
    ],
    "cognitive science": ["cognition", "cognitive psychology", "neuroscience"],
    "economics": ["econometrics", "finance", "economic policy"],
    # Generic research and tooling
    "python": ["programming", "coding", "software development"],
    "statistical analysis": ["statistics", "r", "spss", "data analysis"],
    "research": ["academic research", "scientific research", "investigation"],
}


def _term_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![a-z0-9]){re.escape(term)}(?![a-z0-9])")


_CLUSTER_PATTERNS: list[tuple[list[str], list[re.Pattern[str]]]] = [
    (terms, [_term_pattern(term) for term in terms])
    for terms in ([key, *related] for key, related in SYNONYM_CLUSTERS.items())
]


def normalize_label(label: Any) -> str:
    """Lowercase and trim a label; non-string values normalize to ""."""
    if not isinstance(label, str):
        return ""
    return label.strip().lower()


def _touches(text: str, patterns: list[re.Pattern[str]]) -> bool:
    return any(pattern.search(text) for pattern in patterns)


def _contains_fragment(text: str, terms: list[str]) -> bool:
    return any(len(term) >= MIN_FRAGMENT_LENGTH and term in text for term in terms)


def _cluster_similarity(s1: str, s2: str) -> float:
    related_fragment = False

    for terms, patterns in _CLUSTER_PATTERNS:
        touches_1 = _touches(s1, patterns)
        touches_2 = _touches(s2, patterns)

        if touches_1 and touches_2:
            return CLUSTER_SCORE

        if (touches_1 and _contains_fragment(s2, terms)) or (
            touches_2 and _contains_fragment(s1, terms)
        ):
            related_fragment = True

    return RELATED_FRAGMENT_SCORE if related_fragment else 0.0


def similarity(a: Any, b: Any) -> float:
    """Score the textual closeness of two labels.

    Args:
        a: First label
        b: Second label

    Returns:
        Similarity in [0.0, 1.0]. Empty or non-string labels score 0.0.

    Example:
        >>> similarity("Machine Learning", "machine learning ")
        1.0
        >>> similarity("Machine Learning", "Artificial Intelligence")
        0.85
    """
    s1 = normalize_label(a)
    s2 = normalize_label(b)

    if not s1 or not s2:
        return 0.0

    if s1 == s2:
        return EXACT_SCORE

    if s1 in s2 or s2 in s1:
        return CONTAINMENT_SCORE

    words_1 = set(s1.split())
    words_2 = set(s2.split())
    common_words = words_1 & words_2
    if common_words:
        overlap = len(common_words) / max(len(words_1), len(words_2))
        return TOKEN_OVERLAP_BASE + overlap * TOKEN_OVERLAP_SPAN

    return _cluster_similarity(s1, s2)


def best_similarity(label: Any, candidates: list[str]) -> float:
    """Highest similarity between a label and any candidate label."""
    return max((similarity(label, candidate) for candidate in candidates), default=0.0)
