from __future__ import annotations

import re
from dataclasses import dataclass

from .models import SegmentKind


BOLD_KEYWORDS: tuple[str, ...] = ("bold", "heavy", "black", "demi")
ITALIC_KEYWORDS: tuple[str, ...] = ("italic", "oblique", "slant")

# Closed list of academic section names, matched case-insensitively.
KNOWN_SECTION_NAMES: tuple[str, ...] = (
    # Standard sections
    "abstract",
    "introduction",
    "background",
    "related work",
    "related works",
    "preliminaries",
    "problem statement",
    "problem formulation",
    # Methods / model
    "methods",
    "method",
    "methodology",
    "approach",
    "our approach",
    "proposed method",
    "proposed approach",
    "model",
    "model architecture",
    "architecture",
    "framework",
    "materials and methods",
    # Experiments
    "experiments",
    "experiment",
    "experimental setup",
    "experimental settings",
    "experimental results",
    "evaluation",
    "setup",
    "training",
    "implementation",
    "implementation details",
    # Results
    "results",
    "result",
    "results and discussion",
    "analysis",
    "ablation study",
    "ablation studies",
    "ablations",
    # Discussion / conclusion
    "discussion",
    "conclusion",
    "conclusions",
    "conclusion and future work",
    "conclusions and future work",
    "future work",
    "limitations",
    "limitations and future work",
    "broader impact",
    "ethics statement",
    "societal impact",
    # End matter
    "references",
    "bibliography",
    "acknowledgments",
    "acknowledgements",
    "acknowledgment",
    "appendix",
    "appendices",
    "supplementary material",
    "supplementary materials",
    "supplemental material",
)

# (pattern, segment kind). Group 1 is the expression body.
MATH_PATTERNS: tuple[tuple[re.Pattern, SegmentKind], ...] = (
    (re.compile(r"\$\$([\s\S]*?)\$\$"), SegmentKind.MATH_BLOCK),
    (re.compile(r"\\\[([\s\S]*?)\\\]"), SegmentKind.MATH_BLOCK),
    (re.compile(r"\$((?!\$)[^$]*?)\$"), SegmentKind.MATH_INLINE),
    (re.compile(r"\\\(([\s\S]*?)\\\)"), SegmentKind.MATH_INLINE),
)


@dataclass(frozen=True)
class ConvertConfig:
    section_names: tuple[str, ...] = KNOWN_SECTION_NAMES
    bold_keywords: tuple[str, ...] = BOLD_KEYWORDS
    italic_keywords: tuple[str, ...] = ITALIC_KEYWORDS
    math_patterns: tuple[tuple[re.Pattern, SegmentKind], ...] = MATH_PATTERNS
    # Pages are normalized and reconstructed on this many threads; 1 = sequential.
    workers: int = 1
    expand_ligatures: bool = True
