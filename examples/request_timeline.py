"""Example of collecting messages and timings over one simulated request.

Run with:
    python examples/request_timeline.py

Output:
    The JSON payload a toolbar renderer would receive, keyed by
    collector name, followed by the widget definitions.
"""

import json
import logging
import time

from requestbar import MessagesCollector, MessagesHandler, TimeDataCollector

logger = logging.getLogger("example")


def load_user(user_id: int) -> dict[str, object]:
    time.sleep(0.02)
    return {"id": user_id, "name": "alice", "roles": ["admin", "editor"]}


def handle_request(request_start: float) -> dict[str, object]:
    """Handle a fake request while collecting debug data."""
    messages = MessagesCollector()
    timer = TimeDataCollector(request_start_time=request_start)

    handler = MessagesHandler(messages)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        messages.info("handling request for user {user_id}", user_id=7)
        user = timer.measure("Load user", load_user, 7)
        messages.debug(user)

        with timer.span("render", "Render template"):
            time.sleep(0.01)
            logger.warning("template cache is cold")

        # Left open on purpose: closed by collect()
        timer.start_measure("flush", "Flush response")
    finally:
        logger.removeHandler(handler)

    collectors = [messages, timer]
    return {
        "data": {c.name: c.collect() for c in collectors},
        "widgets": {
            name: widget
            for c in collectors
            for name, widget in c.get_widget_definitions().items()
        },
    }


if __name__ == "__main__":
    print(json.dumps(handle_request(time.time()), indent=2))
