"""Draw subscribers and the subscriber list diagrams notify."""
from typing import Iterator, List, Protocol

from diagramkit.domain.base.ports import ConsolePort


class DrawSubscriber(Protocol):
    """Receives textual notifications from a diagram."""

    def notify(self, message: str) -> None:
        ...


class RegularSubscriber:
    """Echoes every notification with a regular prefix."""

    def __init__(self, console: ConsolePort):
        self._console = console

    def notify(self, message: str) -> None:
        self._console.write(f"[Regular Subscriber] {message}")


class ContrastImageSubscriber:
    """Echoes every notification on behalf of the contrast image."""

    def __init__(self, console: ConsolePort):
        self._console = console

    def notify(self, message: str) -> None:
        self._console.write(f"[Contrast Image Subscriber] {message}")


class SubscriberList:
    """
    Ordered list of subscribers.

    Append-only: subscribers are notified in the order they were attached,
    and attaching the same subscriber twice notifies it twice.
    """

    def __init__(self):
        self._subscribers: List[DrawSubscriber] = []

    def attach(self, subscriber: DrawSubscriber) -> None:
        self._subscribers.append(subscriber)

    def notify(self, message: str) -> None:
        for subscriber in self._subscribers:
            subscriber.notify(message)

    def __len__(self) -> int:
        return len(self._subscribers)

    def __iter__(self) -> Iterator[DrawSubscriber]:
        return iter(list(self._subscribers))
