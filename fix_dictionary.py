"""
FIX Tag Dictionary
==================
Minimal FIX 4.x dictionary: tag names plus the display code tables for
message type, side, order status and execution type.

The tables are read-only and shared by every caller; validation never
consults the code tables, they exist for display.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


# ==========================================
# Tags
# ==========================================

TAG_DICTIONARY: Mapping[str, str] = MappingProxyType({
    # Standard header / trailer
    "8":   "BeginString",
    "9":   "BodyLength",
    "35":  "MsgType",
    "49":  "SenderCompID",
    "56":  "TargetCompID",
    "34":  "MsgSeqNum",
    "52":  "SendingTime",
    "10":  "CheckSum",

    # Order identification
    "11":  "ClOrdID",
    "37":  "OrderID",
    "41":  "OrigClOrdID",

    # Instrument
    "55":  "Symbol",
    "107": "SecurityDesc",
    "22":  "SecurityIDSource",
    "48":  "SecurityID",

    # Order details
    "54":  "Side",
    "38":  "OrderQty",
    "40":  "OrdType",
    "44":  "Price",
    "59":  "TimeInForce",
    "99":  "StopPx",

    # Execution details
    "150": "ExecType",
    "39":  "OrdStatus",
    "60":  "TransactTime",
    "32":  "LastQty",
    "31":  "LastPx",
    "151": "LeavesQty",
    "14":  "CumQty",
    "6":   "AvgPx",

    # Trade identification
    "17":  "ExecID",
    "19":  "ExecRefID",
    "20":  "ExecTransType",

    # Parties
    "1":   "Account",
    "76":  "ExecBroker",
    "109": "ClientID",

    # Misc
    "58":  "Text",
    "47":  "OrderCapacity",
    "21":  "HandlInst",
    "18":  "ExecInst",
    "100": "ExDestination",
    "15":  "Currency",
    "64":  "SettlDate",
    "63":  "SettlType",
})


# ==========================================
# Code Tables
# ==========================================

MSG_TYPES: Mapping[str, str] = MappingProxyType({
    "0": "Heartbeat",
    "1": "TestRequest",
    "2": "ResendRequest",
    "3": "Reject",
    "4": "SequenceReset",
    "5": "Logout",
    "8": "ExecutionReport",
    "9": "OrderCancelReject",
    "A": "Logon",
    "D": "NewOrderSingle",
    "F": "OrderCancelRequest",
    "G": "OrderCancelReplaceRequest",
})

SIDE_CODES: Mapping[str, str] = MappingProxyType({
    "1": "Buy",
    "2": "Sell",
    "3": "Buy Minus",
    "4": "Sell Plus",
    "5": "Sell Short",
    "6": "Sell Short Exempt",
    "7": "Undisclosed",
    "8": "Cross",
    "9": "Cross Short",
})

ORD_STATUS_CODES: Mapping[str, str] = MappingProxyType({
    "0": "New",
    "1": "Partially Filled",
    "2": "Filled",
    "3": "Done For Day",
    "4": "Canceled",
    "5": "Replaced",
    "6": "Pending Cancel",
    "7": "Stopped",
    "8": "Rejected",
    "9": "Suspended",
    "A": "Pending New",
    "B": "Calculated",
    "C": "Expired",
    "D": "Accepted For Bidding",
    "E": "Pending Replace",
})

EXEC_TYPE_CODES: Mapping[str, str] = MappingProxyType({
    "0": "New",
    "1": "Partial Fill",
    "2": "Fill",
    "3": "Done For Day",
    "4": "Canceled",
    "5": "Replace",
    "6": "Pending Cancel",
    "7": "Stopped",
    "8": "Rejected",
    "9": "Suspended",
    "A": "Pending New",
    "B": "Calculated",
    "C": "Expired",
    "D": "Restated",
    "E": "Pending Replace",
})


# ==========================================
# Lookups
# ==========================================

def resolve_tag_name(tag: str) -> str:
    """Human-readable name for a tag, or the tag itself when unknown."""
    return TAG_DICTIONARY.get(tag) or tag


def describe_code(table: Mapping[str, str], code: str) -> str:
    label = table.get(code)
    return f"{code} ({label})" if label else code
