"""
Strict FIX Validator
====================
Structural validation of a raw FIX message. Accepts only SOH-delimited
``tag=value`` messages with the standard header in place.

Rules
-----
  delimiter   pipe or caret anywhere in the text             invalid_delimiter
  format      token without '=', non-numeric or empty tag    missing_equals / invalid_tag / empty_tag
  required    BeginString (8), BodyLength (9), MsgType (35)  missing_required_field
  order       8 first; 10 last when present                  invalid_field_order
  whitespace  leading / trailing space, tab or newline       whitespace_issue

Every rule runs on every message, so a single call reports all problems.
Delimiter and whitespace positions are character offsets into the raw text;
format and order positions are token ordinals in the SOH split.
"""

from __future__ import annotations

import re
from typing import Callable, List, Tuple, Union

from fix_config import get_logger
from fix_dictionary import resolve_tag_name
from fix_parser import CARET, DELIMITER_NAMES, PIPE, parse_relaxed, split_fields
from fix_types import (
    IssueType,
    ParseIssue,
    StrictFailure,
    StrictParseResult,
    StrictSuccess,
    coerce_raw,
)

REQUIRED_TAGS = ("8", "9", "35")
WHITESPACE = (" ", "\t", "\n")

_NUMERIC_TAG_RE = re.compile(r"[0-9]+")

log = get_logger("fix_strict")


# ==========================================
# Rules
# ==========================================

def check_delimiters(raw: str) -> List[ParseIssue]:
    issues: List[ParseIssue] = []
    for char in (PIPE, CARET):
        position = raw.find(char)
        if position != -1:
            issues.append(ParseIssue(
                type=IssueType.INVALID_DELIMITER,
                message=(
                    f"Found {DELIMITER_NAMES[char]} character ('{char}') instead of SOH. "
                    f"Use SOH (\\x01) as delimiter."
                ),
                position=position,
            ))
    return issues


def check_format(raw: str) -> List[ParseIssue]:
    issues: List[ParseIssue] = []
    for i, part in enumerate(split_fields(raw)):
        tag, sep, _ = part.partition("=")
        if not sep:
            issues.append(ParseIssue(
                type=IssueType.MISSING_EQUALS,
                message=f"Field at position {i} is missing '=' separator: \"{part}\"",
                position=i,
            ))
            continue

        if not _NUMERIC_TAG_RE.fullmatch(tag):
            issues.append(ParseIssue(
                type=IssueType.INVALID_TAG,
                message=f"Tag must be numeric, found: \"{tag}\"",
                position=i,
            ))
        if tag == "":
            issues.append(ParseIssue(
                type=IssueType.EMPTY_TAG,
                message=f"Empty tag at position {i}",
                position=i,
            ))
    return issues


def check_required_fields(raw: str) -> List[ParseIssue]:
    present = {part.partition("=")[0] for part in split_fields(raw) if "=" in part}
    return [
        ParseIssue(
            type=IssueType.MISSING_REQUIRED_FIELD,
            message=f"Missing required field: {resolve_tag_name(tag)} (tag {tag})",
        )
        for tag in REQUIRED_TAGS
        if tag not in present
    ]


def check_field_order(raw: str) -> List[ParseIssue]:
    issues: List[ParseIssue] = []
    parts = split_fields(raw)
    if not parts:
        return issues

    first = parts[0]
    if not first.startswith("8="):
        first_tag = first.partition("=")[0] if "=" in first else "?"
        issues.append(ParseIssue(
            type=IssueType.INVALID_FIELD_ORDER,
            message=f"BeginString (tag 8) must be first field, found tag {first_tag} first",
            position=0,
        ))

    has_checksum = any(part.startswith("10=") for part in parts)
    if has_checksum and not parts[-1].startswith("10="):
        issues.append(ParseIssue(
            type=IssueType.INVALID_FIELD_ORDER,
            message="CheckSum (tag 10) must be last field if present",
            position=len(parts) - 1,
        ))
    return issues


def check_whitespace(raw: str) -> List[ParseIssue]:
    issues: List[ParseIssue] = []
    if raw.startswith(WHITESPACE):
        issues.append(ParseIssue(
            type=IssueType.WHITESPACE_ISSUE,
            message="Message has leading whitespace",
            position=0,
        ))
    if raw.endswith(WHITESPACE):
        issues.append(ParseIssue(
            type=IssueType.WHITESPACE_ISSUE,
            message="Message has trailing whitespace",
            position=len(raw) - 1,
        ))
    return issues


RULES: Tuple[Callable[[str], List[ParseIssue]], ...] = (
    check_delimiters,
    check_format,
    check_required_fields,
    check_field_order,
    check_whitespace,
)


# ==========================================
# Public API
# ==========================================

def validate(raw: Union[str, bytes]) -> List[ParseIssue]:
    """Run every rule and return the combined issues in rule order."""
    raw = coerce_raw(raw)
    issues: List[ParseIssue] = []
    for rule in RULES:
        issues.extend(rule(raw))
    return issues


def parse_strict(raw: Union[str, bytes]) -> StrictParseResult:
    """
    Parse a FIX message with strict validation.

    Returns ``StrictFailure`` carrying every issue found, or ``StrictSuccess``
    wrapping the relaxed parse of the same text. Never raises on text input.
    """
    raw = coerce_raw(raw)
    issues = validate(raw)

    if issues:
        log.debug(
            "strict_validation_failed",
            issue_count=len(issues),
            issue_types=sorted({i.type for i in issues}),
        )
        return StrictFailure(
            error=f"FIX message validation failed with {len(issues)} issue(s)",
            issues=tuple(issues),
        )

    message = parse_relaxed(raw)
    log.debug("strict_validation_passed", field_count=len(message.fields))
    return StrictSuccess(message=message)
