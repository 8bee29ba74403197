from typing import Any, Callable, Dict, List

# Event payloads are opaque to the emitter and forwarded unmodified
EventPayload = Any

# What the listener registry stores: callables taking only the payload
ListenerWrapper = Callable[[EventPayload], None]

ListenerRegistry = Dict[str, List[ListenerWrapper]]
UnbinderRegistry = Dict[str, List[Callable[..., Any]]]

# Members copied onto a target by augment()
CAPABILITY_METHODS = (
    "on",
    "once",
    "trigger",
    "remove_listener",
    "removeListener",
    "listener_count",
)
