import types
import weakref
from typing import Any, Callable, Dict, List, Optional, Union

ListeningMethod = Union[weakref.WeakMethod, types.FunctionType]


class EventListener:
    """
    Event listener class.

    Callbacks are registered for a string `event` with `subscribe` and called
    synchronously by `dispatch`, in the order they were subscribed. Extra
    positional and keyword arguments given to `dispatch` are forwarded to every
    callback, so all callbacks of one event must share a signature.

    Bound methods are stored as WeakMethod references so that subscribing does not
    keep the owner alive. References whose owner has been garbage collected are
    skipped on dispatch and pruned. Plain functions are stored as they are.
    Coroutine functions are not supported.
    """

    _listener: Dict[str, List[ListeningMethod]]

    def __init__(self):
        self._listener = {}

    def subscribe(self, event: str, method: Callable[..., Any]):
        """
        Subscribes the callback `method` to the event `event`. Subscribing the same
        callback twice has no effect.

        :param event: The event name.
        :param method: The callback method or function.
        :raises ValueError: If no event name is provided.
        :raises TypeError: If `method` is neither a method nor a function.
        """
        if not event:
            raise ValueError("You must specify a valid event name.")

        reference = self._reference_method(method)
        callbacks = self._listener.setdefault(event, [])
        if reference not in callbacks:
            callbacks.append(reference)

    def unsubscribe(self, event: str, method: Callable[..., Any]):
        """
        Unsubscribes the callback `method` from the event `event`. Unknown events or
        callbacks are ignored.

        :param event: The event name.
        :param method: The callback method or function.
        """
        reference = self._reference_method(method)
        callbacks = self._listener.get(event, [])
        if reference in callbacks:
            callbacks.remove(reference)

    def subscribers(self, event: str) -> int:
        """
        Returns how many live callbacks are subscribed to `event`.
        """
        return sum(
            1
            for reference in self._listener.get(event, [])
            if self._resolve_reference(reference) is not None
        )

    def _reference_method(self, method: Callable[..., Any]) -> ListeningMethod:
        if isinstance(method, types.MethodType):
            return weakref.WeakMethod(method)  # type: ignore
        elif isinstance(method, types.FunctionType):
            return method  # type: ignore
        else:
            raise TypeError(
                "The parameter `method` must be either a method or a function"
            )

    def dispatch(self, event: str, *args, **kwargs):
        """
        Synchronously calls every callback subscribed to `event` with `args` and
        `kwargs`. Exceptions raised by a callback interrupt the dispatch and are
        propagated to the caller.

        :param event: The event name.
        :param args: The positional arguments passed to the callbacks.
        :param kwargs: The keyword arguments passed to the callbacks.
        """
        callbacks = self._listener.get(event)
        if not callbacks:
            return

        dead = []
        for reference in list(callbacks):
            method = self._resolve_reference(reference)
            if method is None:
                dead.append(reference)
                continue

            method(*args, **kwargs)

        for reference in dead:
            if reference in callbacks:
                callbacks.remove(reference)

    def _resolve_reference(
        self, reference: ListeningMethod
    ) -> Optional[Callable[..., Any]]:
        if isinstance(reference, weakref.WeakMethod):
            return reference()
        else:
            return reference
