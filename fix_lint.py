"""
FIX Lint
========
Human-readable report for a raw FIX message: strict verdict, decoded header,
relaxed-parse warnings, every validation issue and the repair proposals.

Run ``python fix_lint.py`` for a demo over the bundled samples.
"""

from __future__ import annotations

from typing import List, Union

from fix_config import configure_logging
from fix_dictionary import MSG_TYPES, ORD_STATUS_CODES, SIDE_CODES, describe_code
from fix_repair import auto_repair, generate_repair_suggestions
from fix_samples import SAMPLE_MESSAGES
from fix_strict import parse_strict
from fix_types import SOH, StrictFailure, coerce_raw


def _printable(raw: str) -> str:
    return raw.replace(SOH, "|")


def lint(raw: Union[str, bytes]) -> str:
    """Return a multi-line lint report for ``raw``."""
    raw = coerce_raw(raw)
    result = parse_strict(raw)

    lines: List[str] = ["FIX Lint Report"]
    if isinstance(result, StrictFailure):
        lines.append("  Status     : INVALID")
        lines.append(f"  Error      : {result.error}")
        lines.append("\nIssues:")
        for issue in result.issues:
            lines.append(f"  {issue}")

        suggestions = generate_repair_suggestions(raw, result.issues)
        lines.append("\nSuggestions:")
        for s in suggestions:
            lines.append(f"  [{s.type}] {s.description}")
            if s.preview:
                lines.append(f"      preview: {_printable(s.preview)}")

        repaired = auto_repair(raw)
        lines.append(
            "\nAuto-repair: available" if repaired is not None
            else "\nAuto-repair: not applicable"
        )
        return "\n".join(lines)

    message = result.message
    summary = message.summary
    lines.append("  Status     : VALID")
    lines.append(f"  Fields     : {len(message.fields)}")
    lines.append(f"  MsgType    : {describe_code(MSG_TYPES, summary.msg_type or '')}")
    if summary.order_key:
        lines.append(f"  Order key  : {summary.order_key}")
    if summary.side:
        lines.append(f"  Side       : {describe_code(SIDE_CODES, summary.side)}")
    if summary.ord_status:
        lines.append(f"  OrdStatus  : {describe_code(ORD_STATUS_CODES, summary.ord_status)}")

    if message.warnings:
        lines.append("\nWarnings:")
        for w in message.warnings:
            lines.append(f"  {w}")
    else:
        lines.append("\nNo issues found.")
    return "\n".join(lines)


# ==========================================
# CLI / Demo
# ==========================================

if __name__ == "__main__":
    configure_logging()
    malformed = " 8=FIX.4.4|9=100|35=D|11=ORDER123|55=AAPL| "

    print("=" * 60)
    print("  FIX Lint - Sample Messages")
    print("=" * 60)
    for sample in SAMPLE_MESSAGES[:3]:
        print(f"\n{sample.name}: {sample.description}")
        print(lint(sample.message))

    print("\n" + "=" * 60)
    print("  FIX Lint - Malformed Message")
    print("=" * 60)
    print(f"\nMessage: {malformed!r}")
    print(lint(malformed))

    repaired = auto_repair(malformed)
    if repaired is not None:
        print(f"\nAfter auto-repair: {_printable(repaired)}")
        print(lint(repaired))
