from __future__ import annotations

import asyncio
import logging

logger = logging.getLogger(__name__)

SAMPLE_DATA: tuple[int, ...] = (1, 2, 3)


async def fetch_data(delay: float = 0.0) -> list[int]:
    """Resolve to the sample data after one timer tick of ``delay`` seconds."""
    await asyncio.sleep(delay)
    logger.debug(f"fetch_data resolved after {delay}s")
    return list(SAMPLE_DATA)
