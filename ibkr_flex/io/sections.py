# ibkr_flex/io/sections.py
"""
Section-level decoding.

The trades section mixes several tag kinds that share one attribute
dictionary and are ordered by symbol, not by tag. Every child is decoded
with the shared trade decoder and routed by tag name; the other sections
are a plain decode of one repeated element.
"""

import xml.etree.ElementTree as ET
from typing import Callable, List, Optional, Tuple, TypeVar

from ibkr_flex.domain.models import Trade
from ibkr_flex.io.records import decode_trade
from ibkr_flex.logging_setup import get_logger

logger = get_logger(__name__)

R = TypeVar("R")

TRADE_TAG = "Trade"
WASH_SALE_TAG = "WashSale"

# Legitimate trades-section content outside the retained buckets
DISCARDED_TRADE_TAGS = frozenset({"Order", "SymbolSummary", "AssetSummary", "Lot"})


def classify_trades(section: Optional[ET.Element]) -> Tuple[Tuple[Trade, ...], Tuple[Trade, ...]]:
    """
    Split a trades section into (executions, wash_sales).

    Input order is preserved within each bucket. Order, Lot and summary rows
    are decoded like any other row (a corrupt one still fails the parse)
    and then dropped.
    """
    trades: List[Trade] = []
    wash_sales: List[Trade] = []
    if section is None:
        return (), ()

    discarded = 0
    for child in section:
        record = decode_trade(child)
        if child.tag == TRADE_TAG:
            trades.append(record)
        elif child.tag == WASH_SALE_TAG:
            wash_sales.append(record)
        else:
            if child.tag not in DISCARDED_TRADE_TAGS:
                logger.info("Unrecognized <%s> row in trades section, discarded", child.tag)
            discarded += 1

    if discarded:
        logger.debug("Discarded %d non-execution rows from trades section", discarded)
    return tuple(trades), tuple(wash_sales)


def decode_items(
    section: Optional[ET.Element],
    item_tag: str,
    decoder: Callable[[ET.Element], R],
) -> Tuple[R, ...]:
    """Decode every <item_tag> child; a missing section is the same as an empty one."""
    if section is None:
        return ()
    items = []
    for child in section:
        if child.tag != item_tag:
            logger.debug("Skipping <%s> inside <%s>", child.tag, section.tag)
            continue
        items.append(decoder(child))
    return tuple(items)


def decode_single(section: Optional[ET.Element], decoder: Callable[[ET.Element], R]) -> Optional[R]:
    """Decode a section that is itself the record (AccountInformation, ChangeInNAV)."""
    if section is None or not section.attrib:
        return None
    return decoder(section)
