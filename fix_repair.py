"""
FIX Repair Suggestions
======================
Turns strict-validation issues into human-reviewable fix proposals, and
applies the safe subset of them automatically.

Suggestions are emitted in a fixed order regardless of issue order:
  delimiters -> whitespace -> missing '=' -> tag format -> required fields -> field order

``auto_repair`` only trims whitespace and normalises delimiters. Reordering
fields or inventing missing ones needs a human to decide what was meant.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence, Union

from fix_config import get_logger
from fix_parser import CARET, DELIMITER_NAMES, PIPE
from fix_types import SOH, IssueType, ParseIssue, RepairSuggestion, SuggestionType, coerce_raw

PREVIEW_LIMIT = 100

# Whitespace and line terminators trimmed from message ends. Information
# separators (\x1c-\x1f) and NEL (\x85) are data, the BOM is not.
TRIM_CHARS = " \t\n\v\f\r" + "".join(map(chr, (
    0x00A0, 0x1680, *range(0x2000, 0x200B),
    0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
)))

_QUOTED_RE        = re.compile(r'"([^"]+)"')
_TAG_REMAINDER_RE = re.compile(r"^([0-9]+)(.*)$", re.DOTALL)
_NAMED_TAG_RE     = re.compile(r"(\w+) \(tag ([0-9]+)\)")

log = get_logger("fix_repair")


def _truncate(text: str, limit: int = PREVIEW_LIMIT) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


# ==========================================
# Suggestion Builders
# ==========================================

def _normalize_delimiters(raw: str) -> Optional[RepairSuggestion]:
    # Re-scan the text: pipe wins over caret, matching the relaxed parser
    if PIPE in raw:
        delimiter = PIPE
    elif CARET in raw:
        delimiter = CARET
    else:
        return None
    return RepairSuggestion(
        type=SuggestionType.NORMALIZE_DELIMITERS,
        description=f"Replace {DELIMITER_NAMES[delimiter]} characters with SOH (\\x01) delimiter",
        preview=_truncate(raw.replace(delimiter, SOH)),
    )


def _trim_whitespace(raw: str) -> RepairSuggestion:
    return RepairSuggestion(
        type=SuggestionType.TRIM_WHITESPACE,
        description="Remove leading and trailing whitespace",
        preview=_truncate(raw.strip(TRIM_CHARS)),
    )


def _add_equals(issue: ParseIssue) -> Optional[RepairSuggestion]:
    quoted = _QUOTED_RE.search(issue.message)
    m = _TAG_REMAINDER_RE.match(quoted.group(1)) if quoted else None
    if not m:
        return None
    tag, remainder = m.groups()
    return RepairSuggestion(
        type=SuggestionType.ADD_EQUALS,
        description=f"Add '=' separator after numeric tag {tag}",
        preview=f"...{tag}={remainder}...",
    )


def _fix_tag_format() -> RepairSuggestion:
    return RepairSuggestion(
        type=SuggestionType.FIX_TAG_FORMAT,
        description="Ensure all tags are numeric values",
        preview="Example: 35=D (tag must be a number)",
    )


def _add_required_fields(issues: Sequence[ParseIssue]) -> Optional[RepairSuggestion]:
    missing = []
    for issue in issues:
        m = _NAMED_TAG_RE.search(issue.message)
        if m:
            missing.append(f"{m.group(1)} ({m.group(2)})")
    if not missing:
        return None
    return RepairSuggestion(
        type=SuggestionType.ADD_REQUIRED_FIELDS,
        description=f"Add missing required fields: {', '.join(missing)}",
        preview="Example: 8=FIX.4.4 (BeginString must be present)",
    )


def _reorder_fields(issue: ParseIssue) -> Optional[RepairSuggestion]:
    if "BeginString" in issue.message:
        return RepairSuggestion(
            type=SuggestionType.REORDER_FIELDS,
            description="Move BeginString (tag 8) to the beginning of the message",
            preview=f"8=FIX.4.4{SOH}...",
        )
    if "CheckSum" in issue.message:
        return RepairSuggestion(
            type=SuggestionType.REORDER_FIELDS,
            description="Move CheckSum (tag 10) to the end of the message",
            preview=f"...{SOH}10=123",
        )
    return None


# ==========================================
# Public API
# ==========================================

def generate_repair_suggestions(
    raw: Union[str, bytes], issues: Sequence[ParseIssue]
) -> List[RepairSuggestion]:
    """
    Propose fixes for ``issues`` found in ``raw``.

    At most one suggestion per type, except field order which gets one per
    distinct violation. Falls back to a single ``general`` suggestion when
    issues exist but none could be mapped; no issues means no suggestions.
    """
    raw = coerce_raw(raw)
    by_type: Dict[IssueType, List[ParseIssue]] = {}
    for issue in issues:
        by_type.setdefault(IssueType(issue.type), []).append(issue)

    candidates: List[Optional[RepairSuggestion]] = []
    if IssueType.INVALID_DELIMITER in by_type:
        candidates.append(_normalize_delimiters(raw))
    if IssueType.WHITESPACE_ISSUE in by_type:
        candidates.append(_trim_whitespace(raw))
    if IssueType.MISSING_EQUALS in by_type:
        candidates.append(_add_equals(by_type[IssueType.MISSING_EQUALS][0]))
    if IssueType.INVALID_TAG in by_type:
        candidates.append(_fix_tag_format())
    if IssueType.MISSING_REQUIRED_FIELD in by_type:
        candidates.append(_add_required_fields(by_type[IssueType.MISSING_REQUIRED_FIELD]))

    seen_order_messages = set()
    for issue in by_type.get(IssueType.INVALID_FIELD_ORDER, []):
        if issue.message in seen_order_messages:
            continue
        seen_order_messages.add(issue.message)
        candidates.append(_reorder_fields(issue))

    suggestions = [s for s in candidates if s is not None]

    if not suggestions and issues:
        suggestions.append(RepairSuggestion(
            type=SuggestionType.GENERAL,
            description=f"Fix {len(issues)} validation issue(s) found in the message",
            preview="Review the issues list and correct the message format",
        ))
    return suggestions


def auto_repair(raw: Union[str, bytes]) -> Optional[str]:
    """
    Trim whitespace and normalise pipe and caret delimiters to SOH.

    Returns the repaired text, or None when neither transform changed anything.
    """
    raw = coerce_raw(raw)
    repaired = raw.strip(TRIM_CHARS)
    trimmed = repaired != raw

    replaced = []
    for delimiter in (PIPE, CARET):
        if delimiter in repaired:
            repaired = repaired.replace(delimiter, SOH)
            replaced.append(DELIMITER_NAMES[delimiter])

    if not trimmed and not replaced:
        return None
    log.debug("auto_repair_applied", trimmed=trimmed, delimiters=replaced)
    return repaired
