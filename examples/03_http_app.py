"""
HTTP example of api-flow-simulator.

Demonstrates:
- Serving one controller to a polling UI
- Mounting the router under a custom prefix next to your own routes
"""

from fastapi import Depends, FastAPI

from api_flow_simulator import (
    FlowController,
    Mode,
    Speed,
    controller_dependency,
    flow_router,
)

controller = FlowController(Mode.AUTO, Speed.NORMAL)

app = FastAPI(title="API Flow Simulator Example")
app.include_router(flow_router(controller, prefix="/demo"))


@app.get("/")
async def summary(ctrl: FlowController = Depends(controller_dependency(controller))):
    """Short status line for a dashboard."""
    state = ctrl.get_state()
    return {"stage": state.stage.value, "query": state.query}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)

    # Test with:
    # curl -X POST localhost:8000/demo/start -H 'Content-Type: application/json' -d '{"query": "Roma"}'
    # curl localhost:8000/demo/state
    # curl localhost:8000/demo/payload
