"""A student's day -- the simplest fsm-history program.

Demonstrates:
- Building a machine from a plain config dict
- Moving with trigger() and change_state()
- Walking back and forth with undo() and redo()
- Listening to transitions with on_transition

Run: python -m examples.basics
"""

from fsm_history import StateMachine, UndefinedTransitionError

CONFIG = {
    "initial": "normal",
    "states": {
        "normal": {"transitions": {"study": "busy"}},
        "busy": {"transitions": {"get_tired": "sleeping", "get_hungry": "hungry"}},
        "hungry": {"transitions": {"eat": "normal"}},
        "sleeping": {"transitions": {"get_hungry": "hungry", "get_up": "normal"}},
    },
}


def show(old: str, new: str) -> None:
    print(f"  {old} -> {new}")


def main() -> None:
    print("=== A student's day ===\n")

    fsm = StateMachine(CONFIG, on_transition=show)

    for event in ("study", "get_tired", "get_hungry", "eat"):
        fsm.trigger(event)

    # "eat" is not defined from "normal".
    try:
        fsm.trigger("eat")
    except UndefinedTransitionError as exc:
        print(f"  rejected: {exc}")

    print("\nUndo twice:")
    fsm.undo()
    fsm.undo()

    print("\nRedo once:")
    fsm.redo()

    print(f"\nStates reacting to 'get_hungry': {fsm.get_states('get_hungry')}")
    print(f"History: {' > '.join(fsm.history)}")


if __name__ == "__main__":
    main()
