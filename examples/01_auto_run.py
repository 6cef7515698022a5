"""
Automatic mode example of api-flow-simulator.

Demonstrates:
- Running a session on timers at a chosen speed
- Following the stages with an OnTransition hook
- Rendering the synthetic payload of each stage
"""

import asyncio
import json
import logging

from api_flow_simulator import (
    FlowController,
    Mode,
    OnTransition,
    Speed,
    stage_payload,
)


def show(session, previous):
    payload = stage_payload(session)
    print(f"{previous.value:>20} -> {session.stage.value}")
    print(f"  {payload['title']}")
    print(json.dumps(payload["payload"], indent=2, ensure_ascii=False))


async def main():
    controller = FlowController(Mode.AUTO, Speed.FAST, hooks=[OnTransition(show)])
    for query in ("New York", "Unknown City"):
        state = await controller.run(query)
        print(f"== {query}: {state.stage.value}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
