"""
Tests for fix_strict.py (strict validation)

Run with:  pytest tests/test_strict.py -v
"""

import pytest

from fix_parser import parse_relaxed
from fix_strict import (
    check_delimiters,
    check_field_order,
    check_format,
    check_required_fields,
    check_whitespace,
    parse_strict,
    validate,
)
from fix_types import IssueType, StrictFailure, StrictSuccess

SOH = "\x01"


def soh(*fields: str) -> str:
    return SOH.join(fields)


def issue_types(result) -> set:
    return {i.type for i in result.issues}


# ==========================================
# Valid Messages
# ==========================================

class TestValidMessages:
    def test_new_order_single(self):
        raw = soh("8=FIX.4.4", "9=100", "35=D", "11=ORDER123", "55=AAPL", "54=1", "38=100") + SOH
        result = parse_strict(raw)
        assert isinstance(result, StrictSuccess)
        assert result.success is True
        assert result.message.summary.msg_type == "D"
        assert result.message.summary.cl_ord_id == "ORDER123"
        assert result.message.order_key == "ORDER123"

    def test_checksum_at_end(self):
        raw = soh("8=FIX.4.4", "9=100", "35=D", "11=ORDER123", "55=AAPL", "10=123")
        assert parse_strict(raw).success

    def test_success_matches_relaxed_fields(self):
        raw = soh("8=FIX.4.4", "9=100", "35=8", "11=A", "39=2", "10=000")
        result = parse_strict(raw)
        assert result.success
        assert result.message.fields == parse_relaxed(raw).fields

    def test_duplicate_tags_are_not_errors(self):
        raw = soh("8=FIX.4.4", "9=100", "35=D", "11=A", "11=B")
        result = parse_strict(raw)
        assert result.success
        assert "Duplicate tag 11 appears 2 times" in result.message.warnings

    def test_bytes_input(self):
        assert parse_strict(soh("8=FIX.4.4", "9=5", "35=0").encode()).success


# ==========================================
# Delimiter Rule
# ==========================================

class TestDelimiterRule:
    def test_pipe_rejected(self):
        result = parse_strict("8=FIX.4.4|9=100|35=D|")
        assert isinstance(result, StrictFailure)
        assert IssueType.INVALID_DELIMITER in issue_types(result)
        assert any("pipe" in i.message for i in result.issues)

    def test_caret_rejected(self):
        result = parse_strict("8=FIX.4.4^9=100^35=D^")
        assert not result.success
        assert any(i.type == "invalid_delimiter" and "caret" in i.message for i in result.issues)

    def test_pipe_and_caret_both_reported(self):
        issues = check_delimiters("8=FIX.4.4|58=a^b")
        assert [i.position for i in issues] == [9, 14]
        assert all(i.type == IssueType.INVALID_DELIMITER for i in issues)

    def test_position_is_first_occurrence(self):
        issues = check_delimiters("8=FIX.4.4|35=D|")
        assert len(issues) == 1
        assert issues[0].position == 9
        assert issues[0].position_space == "char"

    def test_pipe_message_without_soh(self):
        result = parse_strict("8=FIX.4.4|35=D|11=X|")
        assert not result.success
        types = issue_types(result)
        assert "invalid_delimiter" in types
        missing = [i.message for i in result.issues if i.type == "missing_required_field"]
        assert "Missing required field: BodyLength (tag 9)" in missing


# ==========================================
# Format Rule
# ==========================================

class TestFormatRule:
    def test_missing_equals(self):
        result = parse_strict(soh("8=FIX.4.4", "9=100", "35=D", "InvalidField"))
        assert not result.success
        issue = next(i for i in result.issues if i.type == "missing_equals")
        assert "InvalidField" in issue.message
        assert issue.position == 3
        assert issue.position_space == "token"

    def test_missing_equals_quotes_token(self):
        issues = check_format(soh("8=FIX.4.4", "9=100", "35D") + SOH)
        assert len(issues) == 1
        assert issues[0].message == "Field at position 2 is missing '=' separator: \"35D\""

    def test_non_numeric_tag(self):
        result = parse_strict(soh("8=FIX.4.4", "9=100", "35=D", "ABC=value"))
        assert not result.success
        issue = next(i for i in result.issues if i.type == "invalid_tag")
        assert "ABC" in issue.message
        assert issue.position == 3

    def test_unicode_digits_are_not_numeric(self):
        issues = check_format("²³=x")
        assert [i.type for i in issues] == ["invalid_tag"]

    def test_empty_tag_reports_invalid_and_empty(self):
        issues = check_format(soh("8=FIX.4.4", "=value"))
        assert [(i.type, i.position) for i in issues] == [
            ("invalid_tag", 1),
            ("empty_tag", 1),
        ]

    def test_format_rule_ignores_pipes(self):
        # The whole pipe-delimited body is a single SOH token with tag "8"
        assert check_format("8=FIX.4.4|35D|") == []


# ==========================================
# Required Fields Rule
# ==========================================

class TestRequiredFieldsRule:
    @pytest.mark.parametrize("missing_tag, name", [
        ("8", "BeginString"),
        ("9", "BodyLength"),
        ("35", "MsgType"),
    ])
    def test_each_required_field(self, missing_tag, name):
        present = [f for f in ("8=FIX.4.4", "9=100", "35=D") if not f.startswith(missing_tag + "=")]
        issues = check_required_fields(soh(*present, "11=ORDER1"))
        assert len(issues) == 1
        assert issues[0].type == IssueType.MISSING_REQUIRED_FIELD
        assert issues[0].message == f"Missing required field: {name} (tag {missing_tag})"
        assert issues[0].position is None
        assert issues[0].position_space is None

    def test_all_missing_on_empty_message(self):
        assert len(check_required_fields("")) == 3

    def test_all_present(self):
        assert check_required_fields(soh("8=FIX.4.4", "9=100", "35=D")) == []


# ==========================================
# Field Order Rule
# ==========================================

class TestFieldOrderRule:
    def test_begin_string_not_first(self):
        result = parse_strict(soh("35=D", "8=FIX.4.4", "9=100") + SOH)
        assert not result.success
        issue = next(i for i in result.issues if i.type == "invalid_field_order")
        assert "must be first" in issue.message
        assert "found tag 35 first" in issue.message
        assert issue.position == 0

    def test_first_token_without_equals(self):
        issues = check_field_order(soh("garbage", "8=FIX.4.4"))
        assert issues[0].message == "BeginString (tag 8) must be first field, found tag ? first"

    def test_checksum_not_last(self):
        raw = soh("8=FIX.4.4", "9=100", "35=D", "10=123", "11=ORDER123")
        result = parse_strict(raw)
        assert not result.success
        issue = next(i for i in result.issues if i.type == "invalid_field_order")
        assert "must be last" in issue.message
        assert issue.position == 4

    def test_no_checksum_is_fine(self):
        assert check_field_order(soh("8=FIX.4.4", "9=100", "35=D")) == []

    def test_empty_message_has_no_order_issues(self):
        assert check_field_order("") == []


# ==========================================
# Whitespace Rule
# ==========================================

class TestWhitespaceRule:
    def test_leading_and_trailing(self):
        raw = f" 8=FIX.4.4{SOH}9=100{SOH}35=D{SOH} "
        result = parse_strict(raw)
        assert not result.success
        ws = [i for i in result.issues if i.type == "whitespace_issue"]
        assert len(ws) == 2
        assert ws[0].message == "Message has leading whitespace"
        assert ws[0].position == 0
        assert ws[1].message == "Message has trailing whitespace"
        assert ws[1].position == len(raw) - 1

    @pytest.mark.parametrize("char", [" ", "\t", "\n"])
    def test_each_whitespace_char(self, char):
        assert len(check_whitespace(f"{char}8=FIX.4.4{char}")) == 2

    def test_carriage_return_is_not_checked(self):
        assert check_whitespace("8=FIX.4.4\r") == []

    def test_single_space_reports_both(self):
        assert [i.position for i in check_whitespace(" ")] == [0, 0]


# ==========================================
# Aggregation
# ==========================================

class TestAggregation:
    def test_reports_every_independent_defect(self):
        result = parse_strict(" 8=FIX.4.4|35=D|ABC=value|")
        assert not result.success
        types = issue_types(result)
        for expected in ("whitespace_issue", "invalid_delimiter", "invalid_tag",
                         "missing_required_field", "invalid_field_order"):
            assert expected in types
        assert len(result.issues) > 3

    def test_error_counts_issues(self):
        result = parse_strict("8=FIX.4.4|35=D|")
        assert not result.success
        assert result.error == f"FIX message validation failed with {len(result.issues)} issue(s)"

    def test_issues_follow_rule_order(self):
        raw = soh(" 35=D", "ABC=1", "10=1", "8=FIX.4.4|")
        order = ["invalid_delimiter", "invalid_tag", "missing_required_field",
                 "invalid_field_order", "whitespace_issue"]
        seen = [i.type for i in validate(raw)]
        firsts = [seen.index(t) for t in order]
        assert firsts == sorted(firsts)

    def test_empty_message_fails_on_required_fields(self):
        result = parse_strict("")
        assert not result.success
        assert issue_types(result) == {"missing_required_field"}

    def test_failure_serializes_for_callers(self):
        data = parse_strict("8=FIX.4.4|35=D|").model_dump(by_alias=True)
        assert data["success"] is False
        assert data["issues"][0]["type"] == "invalid_delimiter"

    def test_relaxed_still_reads_misordered_message(self):
        raw = soh("35=D", "8=FIX.4.4", "9=100") + SOH
        assert not parse_strict(raw).success
        assert parse_relaxed(raw).summary.msg_type == "D"
