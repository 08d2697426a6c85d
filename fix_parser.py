"""
Relaxed FIX Parser
==================
Best-effort field extraction that never fails.

Accepted delimiters, tried in this order:
  \\x01  SOH (standard)
  |     pipe (human-readable logs)
  ^     caret

The first delimiter found is normalised to SOH; only one delimiter type is
substituted per message, so a caret inside a pipe-delimited message stays
part of the field value. Anything unusual becomes a warning on the result.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence, Union

from fix_config import get_logger
from fix_dictionary import resolve_tag_name
from fix_types import SOH, FixField, MessageSummary, ParsedMessage, coerce_raw

PIPE  = "|"
CARET = "^"

DELIMITERS = (SOH, PIPE, CARET)
DELIMITER_NAMES = {SOH: "SOH", PIPE: "pipe", CARET: "caret"}

UNKNOWN_TAG = "?"

log = get_logger("fix_parser")


# ==========================================
# Tokenizer
# ==========================================

def detect_delimiter(raw: str) -> str:
    for delimiter in DELIMITERS:
        if delimiter in raw:
            return delimiter
    return SOH


def normalize_delimiters(raw: str) -> str:
    """Replace the detected delimiter with SOH."""
    delimiter = detect_delimiter(raw)
    if delimiter == SOH:
        return raw
    return raw.replace(delimiter, SOH)


def split_fields(text: str) -> List[str]:
    """SOH-split ``text``, dropping the empty segments double or trailing delimiters leave."""
    return [part for part in text.split(SOH) if part]


def parse_field(token: str) -> FixField:
    tag, sep, value = token.partition("=")
    if not sep:
        return FixField(tag=UNKNOWN_TAG, name="Unknown", value=token)
    return FixField(tag=tag, name=resolve_tag_name(tag), value=value)


# ==========================================
# Summary
# ==========================================

def extract_summary(fields: Sequence[FixField]) -> MessageSummary:
    """Project the order-lifecycle fields; the last occurrence of a tag wins."""
    values: Dict[str, str] = {f.tag: f.value for f in fields}
    cl_ord_id = values.get("11")
    return MessageSummary(
        msg_type=values.get("35"),
        cl_ord_id=cl_ord_id,
        order_key=cl_ord_id,
        order_id=values.get("37"),
        symbol=values.get("55"),
        side=values.get("54"),
        qty=values.get("38"),
        price=values.get("44"),
        ord_status=values.get("39"),
        # TransactTime, then ExecType, then OrdStatus
        trans_type=values.get("60") or values.get("150") or values.get("39"),
    )


# ==========================================
# Warnings
# ==========================================

def _warnings(delimiter: str, fields: Sequence[FixField]) -> List[str]:
    warnings: List[str] = []

    if delimiter != SOH:
        warnings.append(
            f"Non-standard delimiter detected ('{DELIMITER_NAMES[delimiter]}') and normalized to SOH"
        )

    tags = {f.tag for f in fields}
    if "8" not in tags:
        warnings.append("Missing BeginString (tag 8)")
    if "35" not in tags:
        warnings.append("Missing MsgType (tag 35)")

    for tag, count in Counter(f.tag for f in fields).items():
        if count > 1:
            warnings.append(f"Duplicate tag {tag} appears {count} times")

    empty = [f.tag for f in fields if f.value == ""]
    if empty:
        warnings.append(f"Empty values found in tags: {', '.join(empty)}")

    return warnings


# ==========================================
# Public API
# ==========================================

def parse_relaxed(raw: Union[str, bytes]) -> ParsedMessage:
    """
    Parse a FIX message with relaxed rules.

    Never raises on malformed text: the worst case is an empty field list with
    warnings. ``raw`` on the result is the SOH-normalised text.
    """
    raw = coerce_raw(raw)
    delimiter = detect_delimiter(raw)
    normalized = normalize_delimiters(raw)
    if delimiter != SOH:
        log.debug("delimiter_normalized", delimiter=DELIMITER_NAMES[delimiter])

    fields = tuple(parse_field(token) for token in split_fields(normalized))
    summary = extract_summary(fields)
    warnings = _warnings(delimiter, fields)

    log.debug("relaxed_parse", field_count=len(fields), warning_count=len(warnings))
    return ParsedMessage(
        fields=fields,
        summary=summary,
        warnings=tuple(warnings),
        order_key=summary.order_key,
        raw=normalized,
    )
