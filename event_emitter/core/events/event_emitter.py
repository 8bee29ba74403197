"""
EventEmitter Mixin

Gives any object ``on``, ``once``, ``trigger`` and ``remove_listener`` without
requiring it to inherit from anything. Either subclass :class:`EventEmitter`
or graft the capability onto an existing object or class with :func:`augment`:

    class Scroller:
        def scroll_complete(self):
            self.trigger("scrolled", {"baz": "eck"})

    augment(Scroller)

    def on_scrolled(self, event):
        print(f"scrolled! foo={self.foo}, baz={event['baz']}")

    scroller = Scroller()
    scroller.foo = "bar"
    scroller.on("scrolled", on_scrolled)
    scroller.scroll_complete()
    scroller.remove_listener("scrolled", on_scrolled)

Listeners run synchronously, most recently registered first. Exceptions raised
by a listener propagate out of ``trigger`` and stop the remaining listeners.
"""

from __future__ import annotations
import types
from typing import Any, Callable, Tuple, TypeVar

from event_emitter.config.logging import EMITTER_LOGGER_NAME
from event_emitter.config.settings import get_settings
from event_emitter.core.types.event_types import (
    CAPABILITY_METHODS,
    EventPayload,
    ListenerRegistry,
    ListenerWrapper,
    UnbinderRegistry,
)
from event_emitter.loggers.base import Logger

T = TypeVar("T")

LISTENERS_ATTR = "_ee_listeners"
UNBINDERS_ATTR = "_ee_unbinders"

_MISSING: Any = object()

logger = Logger(EMITTER_LOGGER_NAME, "emitter", get_settings().log_level)


def _debug_enabled() -> bool:
    return logger.is_enabled_for("debug")


def _describe(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


def _registries(target: Any) -> Tuple[ListenerRegistry, UnbinderRegistry]:
    """Return the target's (listeners, unbinders), creating them on first use"""
    try:
        return getattr(target, LISTENERS_ATTR), getattr(target, UNBINDERS_ATTR)
    except AttributeError:
        listeners: ListenerRegistry = {}
        unbinders: UnbinderRegistry = {}
        setattr(target, LISTENERS_ATTR, listeners)
        setattr(target, UNBINDERS_ATTR, unbinders)
        return listeners, unbinders


def _bind(callback: Callable[..., Any], context: Any) -> ListenerWrapper:
    """Bind a plain function to its context the way a method binds to self.

    Bound methods, builtins and callable objects already carry their own
    receiver and are returned unchanged.
    """
    if isinstance(callback, types.FunctionType):
        return types.MethodType(callback, context)
    return callback


def _attach(
    target: Any, name: str, callback: Callable[..., Any], wrapper: ListenerWrapper
) -> None:
    listeners, unbinders = _registries(target)
    unbinders.setdefault(name, []).append(callback)
    listeners.setdefault(name, []).append(wrapper)


def _detach(target: Any, name: str, wrapper: ListenerWrapper) -> None:
    """Remove the slot holding this exact wrapper, if it is still registered"""
    listeners, unbinders = _registries(target)
    slots = listeners.get(name, [])
    for index in range(len(slots) - 1, -1, -1):
        if slots[index] is wrapper:
            del slots[index]
            del unbinders[name][index]
            return


class EventEmitter:
    """
    Observer-pattern mixin.

    Registries live on each instance and are created lazily, so subclasses
    do not need to call ``super().__init__()``.
    """

    def on(
        self, name: str, callback: Callable[..., Any], context: Any = None
    ) -> None:
        """Bind a callback to an event.

        Args:
            name: The event name.
            callback: A plain function (``def`` or ``lambda``) must accept
                ``(receiver, payload)``: it is bound to ``context`` like a
                method, so ``lambda payload: ...`` raises ``TypeError`` when
                the event fires. Bound methods, ``functools.partial`` objects,
                mocks and other callables are called as ``callback(payload)``.
            context: Receiver for plain-function callbacks. Defaults to the
                emitter itself when omitted or falsy.
        """
        if not context:
            context = self
        _attach(self, name, callback, _bind(callback, context))
        if _debug_enabled():
            logger.debug(f"Listener bound: {name} -> {_describe(callback)}")

    def once(
        self, name: str, callback: Callable[..., Any], context: Any = None
    ) -> None:
        """Bind a callback that is unbound as soon as the event first fires.

        ``callback`` and ``context`` follow the same rules as in :meth:`on`:
        plain functions take ``(receiver, payload)``, anything else takes
        ``(payload)``. The pending registration can be cancelled early with
        ``remove_listener(name, callback)``.
        """
        if not context:
            context = self
        bound = _bind(callback, context)
        fired = False

        def fire_once(payload: EventPayload) -> None:
            nonlocal fired
            if fired:
                return
            fired = True
            try:
                bound(payload)
            finally:
                _detach(self, name, fire_once)

        _attach(self, name, callback, fire_once)
        if _debug_enabled():
            logger.debug(f"One-shot listener bound: {name} -> {_describe(callback)}")

    def trigger(self, name: str, payload: EventPayload = _MISSING) -> None:
        """Fire an event, calling every bound listener with ``payload``.

        Listeners run newest first. The live list is walked by descending
        index, so a listener may unbind itself while it runs.
        """
        if payload is _MISSING:
            payload = {}
        listeners = _registries(self)[0].get(name)
        if listeners is None:
            return

        if get_settings().log_dispatch and _debug_enabled():
            logger.debug(f"Triggering {name} for {len(listeners)} listener(s)")

        index = len(listeners)
        while index:
            index -= 1
            # Earlier listeners may have shrunk the list below this index
            if index < len(listeners):
                listeners[index](payload)

    def remove_listener(self, name: str, callback: Callable[..., Any]) -> None:
        """Unbind every registration of ``callback`` for ``name``.

        ``callback`` is the value originally passed to ``on``/``once``.
        Matching uses ``==``, so a fresh ``obj.method`` matches the bound
        method registered earlier.
        """
        listeners, unbinders = _registries(self)
        bound = unbinders.get(name)
        if not bound:
            return

        removed = 0
        index = len(bound)
        while index:
            index -= 1
            if bound[index] == callback:
                del bound[index]
                del listeners[name][index]
                removed += 1

        if removed and _debug_enabled():
            logger.debug(
                f"Listener unbound: {name} -> {_describe(callback)} ({removed} removed)"
            )

    def listener_count(self, name: str) -> int:
        """Number of listeners currently bound to ``name``."""
        return len(_registries(self)[0].get(name, ()))

    # camelCase alias
    removeListener = remove_listener


def augment(target: T) -> T:
    """Graft the emitter capability onto ``target``.

    Members the target already provides are left alone. An instance (or
    module) gets methods bound to it plus a fresh, empty pair of registries.
    A class gets the plain methods, and each of its instances creates its
    own registries on first use. Returns ``target``, so this doubles as a
    class decorator.
    """
    is_class = isinstance(target, type)
    copied = []
    for method_name in CAPABILITY_METHODS:
        if getattr(target, method_name, None):
            continue
        method = getattr(EventEmitter, method_name)
        setattr(
            target,
            method_name,
            method if is_class else types.MethodType(method, target),
        )
        copied.append(method_name)

    if not is_class:
        setattr(target, LISTENERS_ATTR, {})
        setattr(target, UNBINDERS_ATTR, {})

    if _debug_enabled():
        logger.debug(f"Augmented {_describe(target)} with: {', '.join(copied) or 'nothing'}")
    return target


def is_emitter(obj: Any) -> bool:
    """True when ``obj`` exposes the full emitter capability set."""
    return all(callable(getattr(obj, name, None)) for name in CAPABILITY_METHODS)


__all__ = ["EventEmitter", "augment", "is_emitter"]
