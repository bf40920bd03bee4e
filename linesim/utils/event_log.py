# linesim/utils/event_log.py

from typing import List

from linesim.models.event import EventRecord

BORDER = "-" * 40


def bordered(message: str) -> str:
    return f"{BORDER}\n{message}\n{BORDER}"


def format_record(record: EventRecord) -> List[str]:
    """
    Render one processed event as console blocks.

    The first block names the event, its time and (for per-unit events)
    the product type. A note, when present, gets a block of its own.
    """
    lines = [f"Event: {record.type.value}", f"Time: {record.time}"]
    if record.product_type is not None:
        lines.append(f"Product Type: {record.product_type}")

    blocks = [bordered("\n".join(lines))]
    if record.note:
        blocks.append(bordered(record.note))
    return blocks
