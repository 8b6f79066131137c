"""Streaming batch expansion with real-time progress updates via Server-Sent Events."""

import asyncio
import json
import time
from typing import Any, AsyncGenerator, Dict, List, Optional

from .expand import TermExpander
from ..cache import ExpansionCache
from ..schemas.expand import ExpandRequest, ExpandResponse
from ..utils.helpers import format_error_response, utcnow


class ProgressEvent:
    """Progress event for SSE streaming."""

    def __init__(self, event_type: str, data: Dict[str, Any]):
        self.event_type = event_type
        self.data = data
        self.timestamp = utcnow().isoformat()

    def to_sse_event(self) -> Dict[str, str]:
        """Convert to the event mapping consumed by EventSourceResponse."""
        event_data = {
            "timestamp": self.timestamp,
            "type": self.event_type,
            **self.data
        }
        return {"event": self.event_type, "data": json.dumps(event_data, ensure_ascii=False)}


async def stream_expansions(
    expander: TermExpander,
    items: List[ExpandRequest],
    cache: Optional[ExpansionCache] = None,
    per_item_timeout_s: float = 120,
) -> AsyncGenerator[Dict[str, str], None]:
    """
    Expand several terms concurrently, yielding one event per finished item.

    Items complete in whatever order the provider answers. A failing item
    produces an error event and does not stop the others.

    Args:
        expander: The expansion component
        items: Expansion requests
        cache: Optional caller-side cache shared with the single-term route
        per_item_timeout_s: Upper bound on each model call

    Yields:
        SSE event mappings
    """
    start_time = time.time()

    yield ProgressEvent("expand_start", {
        "status": "starting",
        "total_items": len(items),
    }).to_sse_event()

    async def run(index: int, item: ExpandRequest):
        async def factory():
            return await expander.expand(
                term=item.term,
                definition=item.definition,
                seed_word=item.seed_word,
                glossary_title=item.glossary_title,
                detected_language=item.detected_language,
            )

        try:
            if cache is not None:
                key = cache.get_cache_key(item.term, item.definition, item.seed_word, item.detected_language)
                content = await asyncio.wait_for(cache.get_or_expand(key, factory), timeout=per_item_timeout_s)
            else:
                content = await asyncio.wait_for(factory(), timeout=per_item_timeout_s)
            return index, content, None
        except Exception as e:
            return index, None, e

    tasks = [asyncio.create_task(run(i, item)) for i, item in enumerate(items)]
    succeeded = 0
    failed = 0
    try:
        for next_done in asyncio.as_completed(tasks):
            index, content, error = await next_done
            if error is None:
                succeeded += 1
                response = ExpandResponse.from_content(content)
                yield ProgressEvent("expand_item_completed", {
                    "status": "completed",
                    "index": index,
                    "term": items[index].term,
                    "result": response.model_dump(mode="json", by_alias=True),
                }).to_sse_event()
            else:
                failed += 1
                yield ProgressEvent("expand_item_error", {
                    "status": "failed",
                    "index": index,
                    "term": items[index].term,
                    **format_error_response(error, context="expand"),
                }).to_sse_event()
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()

    yield ProgressEvent("completion", {
        "status": "completed",
        "succeeded": succeeded,
        "failed": failed,
        "processing_time": round(time.time() - start_time, 2),
    }).to_sse_event()
