"""
Manual mode example of api-flow-simulator.

Demonstrates:
- Stepping a session one stage at a time
- Reading the timeline a UI would draw
- Restarting and resetting mid-sequence
"""

from api_flow_simulator import FlowController, Mode, timeline

controller = FlowController(Mode.MANUAL)


def draw():
    state = controller.get_state()
    marks = {"completed": "x", "active": ">", "pending": " ", "error": "!"}
    for row in timeline(state.stage):
        print(f"  [{marks[row.status]}] {row.label}")


if __name__ == "__main__":
    controller.start("Roma")
    draw()
    while not controller.get_state().is_terminal:
        input("Press Enter to advance...")
        controller.advance()
        draw()
    print(controller.get_state().result)

    # A new start() replaces the session; reset() returns to idle
    controller.start("Atlantis")
    controller.advance()
    controller.reset()
    print(controller.get_state().stage)
