"""
Sample FIX 4.4 messages covering one order lifecycle: new orders, broker
acknowledgement, partial and full fills, a cancel request and its reject,
and a rejected order. All of them pass strict validation.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from fix_types import SOH


@dataclass(frozen=True)
class FixSample:
    name: str
    description: str
    message: str


def _join(*fields: str) -> str:
    return SOH.join(fields)


SAMPLE_MESSAGES: Tuple[FixSample, ...] = (
    FixSample(
        "New Order Single",
        "Client submitting a new buy order for 1000 shares of AAPL",
        _join("8=FIX.4.4", "9=200", "35=D", "49=CLIENT1", "56=BROKER1", "34=1",
              "52=20250105-10:30:00", "11=ORDER001", "21=1", "55=AAPL", "54=1",
              "38=1000", "40=2", "44=150.50", "59=0", "60=20250105-10:30:00", "10=123"),
    ),
    FixSample(
        "Execution Report - New",
        "Order acknowledgment from broker",
        _join("8=FIX.4.4", "9=250", "35=8", "49=BROKER1", "56=CLIENT1", "34=2",
              "52=20250105-10:30:01", "11=ORDER001", "37=BROKER001", "17=EXEC001",
              "150=0", "39=0", "55=AAPL", "54=1", "38=1000", "40=2", "44=150.50",
              "151=1000", "14=0", "6=0", "60=20250105-10:30:01", "10=234"),
    ),
    FixSample(
        "Execution Report - Partial Fill",
        "500 shares filled at $150.48",
        _join("8=FIX.4.4", "9=280", "35=8", "49=BROKER1", "56=CLIENT1", "34=3",
              "52=20250105-10:35:00", "11=ORDER001", "37=BROKER001", "17=EXEC002",
              "150=1", "39=1", "55=AAPL", "54=1", "38=1000", "40=2", "44=150.50",
              "32=500", "31=150.48", "151=500", "14=500", "6=150.48",
              "60=20250105-10:35:00", "10=345"),
    ),
    FixSample(
        "Execution Report - Filled",
        "Remaining 500 shares filled at $150.52",
        _join("8=FIX.4.4", "9=280", "35=8", "49=BROKER1", "56=CLIENT1", "34=4",
              "52=20250105-10:40:00", "11=ORDER001", "37=BROKER001", "17=EXEC003",
              "150=2", "39=2", "55=AAPL", "54=1", "38=1000", "40=2", "44=150.50",
              "32=500", "31=150.52", "151=0", "14=1000", "6=150.50",
              "60=20250105-10:40:00", "10=456"),
    ),
    FixSample(
        "New Order Single - Sell",
        "Client submitting a sell order for 500 shares of MSFT",
        _join("8=FIX.4.4", "9=200", "35=D", "49=CLIENT1", "56=BROKER1", "34=5",
              "52=20250105-11:00:00", "11=ORDER002", "21=1", "55=MSFT", "54=2",
              "38=500", "40=2", "44=380.25", "59=0", "60=20250105-11:00:00", "10=567"),
    ),
    FixSample(
        "Order Cancel Request",
        "Client requesting to cancel an order",
        _join("8=FIX.4.4", "9=180", "35=F", "49=CLIENT1", "56=BROKER1", "34=6",
              "52=20250105-11:05:00", "11=ORDER003", "41=ORDER002", "37=BROKER002",
              "55=MSFT", "54=2", "38=500", "60=20250105-11:05:00", "10=678"),
    ),
    FixSample(
        "Order Cancel Reject",
        "Broker rejecting cancel request - order already filled",
        _join("8=FIX.4.4", "9=200", "35=9", "49=BROKER1", "56=CLIENT1", "34=7",
              "52=20250105-11:05:01", "11=ORDER003", "41=ORDER002", "37=BROKER002",
              "39=2", "434=1", "58=Order already filled", "60=20250105-11:05:01",
              "10=789"),
    ),
    FixSample(
        "Execution Report - Rejected",
        "Order rejected due to insufficient funds",
        _join("8=FIX.4.4", "9=220", "35=8", "49=BROKER1", "56=CLIENT1", "34=8",
              "52=20250105-11:10:00", "11=ORDER004", "37=BROKER003", "17=EXEC004",
              "150=8", "39=8", "55=TSLA", "54=1", "38=100", "40=2", "44=250.00",
              "151=0", "14=0", "6=0", "58=Insufficient funds",
              "60=20250105-11:10:00", "10=890"),
    ),
)


def get_all_samples() -> Tuple[FixSample, ...]:
    return SAMPLE_MESSAGES


def get_sample_by_name(name: str) -> Optional[FixSample]:
    for sample in SAMPLE_MESSAGES:
        if sample.name == name:
            return sample
    return None


def get_random_sample(rng: Optional[random.Random] = None) -> FixSample:
    return (rng or random).choice(SAMPLE_MESSAGES)
