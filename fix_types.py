"""
FIX Analyzer Types
==================
Result models shared by the relaxed parser, the strict validator and the
repair engine.

Models are frozen. Attributes are snake_case in Python and serialise to
camelCase (``model_dump(by_alias=True)``) for JSON callers.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

SOH = "\x01"


# ==========================================
# Enums
# ==========================================

class IssueType(str, Enum):
    INVALID_DELIMITER      = "invalid_delimiter"
    MISSING_EQUALS         = "missing_equals"
    INVALID_TAG            = "invalid_tag"
    EMPTY_TAG              = "empty_tag"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    INVALID_FIELD_ORDER    = "invalid_field_order"
    WHITESPACE_ISSUE       = "whitespace_issue"


class SuggestionType(str, Enum):
    NORMALIZE_DELIMITERS = "normalize_delimiters"
    TRIM_WHITESPACE      = "trim_whitespace"
    ADD_EQUALS           = "add_equals"
    FIX_TAG_FORMAT       = "fix_tag_format"
    ADD_REQUIRED_FIELDS  = "add_required_fields"
    REORDER_FIELDS       = "reorder_fields"
    GENERAL              = "general"


# Issue positions are raw-string offsets for these types, token ordinals otherwise
_CHAR_OFFSET_ISSUES = {IssueType.INVALID_DELIMITER.value, IssueType.WHITESPACE_ISSUE.value}


# ==========================================
# Models
# ==========================================

class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class FixField(_FrozenModel):
    tag: str
    name: str
    value: str


class MessageSummary(_FrozenModel):
    msg_type: Optional[str] = None
    cl_ord_id: Optional[str] = None
    order_key: Optional[str] = None
    order_id: Optional[str] = None
    symbol: Optional[str] = None
    side: Optional[str] = None
    qty: Optional[str] = None
    price: Optional[str] = None
    ord_status: Optional[str] = None
    trans_type: Optional[str] = None


class ParsedMessage(_FrozenModel):
    fields: Tuple[FixField, ...] = ()
    summary: MessageSummary = MessageSummary()
    warnings: Tuple[str, ...] = ()
    order_key: Optional[str] = None
    raw: str = ""

    def get(self, tag: str) -> Optional[str]:
        """Value of the last occurrence of ``tag``, or None."""
        for f in reversed(self.fields):
            if f.tag == tag:
                return f.value
        return None


class ParseIssue(_FrozenModel):
    type: IssueType
    message: str
    position: Optional[int] = None

    @property
    def position_space(self) -> Optional[str]:
        if self.position is None:
            return None
        return "char" if self.type in _CHAR_OFFSET_ISSUES else "token"

    def __str__(self) -> str:
        loc = f" (pos {self.position})" if self.position is not None else ""
        return f"[{self.type}]{loc} {self.message}"


class RepairSuggestion(_FrozenModel):
    type: SuggestionType
    description: str
    preview: Optional[str] = None


class StrictSuccess(_FrozenModel):
    success: Literal[True] = True
    message: ParsedMessage


class StrictFailure(_FrozenModel):
    success: Literal[False] = False
    error: str
    issues: Tuple[ParseIssue, ...]


StrictParseResult = Union[StrictSuccess, StrictFailure]


# ==========================================
# Input
# ==========================================

def coerce_raw(raw: Union[str, bytes, bytearray]) -> str:
    """Accept text or undecoded bytes; anything else is a caller bug."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).decode("utf-8", errors="replace")
    raise TypeError(f"raw FIX message must be str or bytes, got {type(raw).__name__}")
