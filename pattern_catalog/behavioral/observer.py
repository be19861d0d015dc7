"""Observer defines a subscription mechanism: when the subject changes, every
subscriber is notified. Readers subscribe to car news and hear about each
item published while they are subscribed."""

from __future__ import annotations

from typing import Callable, List

from pattern_catalog.catalog import PatternCategory, pattern


class Reader:
    def __init__(self, name: str, emit: Callable[[str], None] = print) -> None:
        self.name = name
        self._emit = emit

    def update(self, news: str) -> None:
        self._emit(f"{self.name} notified: {news}")


class AutoNews:
    def __init__(self) -> None:
        self.news = ""
        self.subscribers: List[Reader] = []

    def subscribe(self, reader: Reader) -> None:
        if reader not in self.subscribers:
            self.subscribers.append(reader)

    def unsubscribe(self, reader: Reader) -> None:
        if reader in self.subscribers:
            self.subscribers.remove(reader)

    def set_news(self, text: str) -> None:
        self.news = text
        self.notify_all()

    def notify_all(self) -> None:
        for reader in list(self.subscribers):
            reader.update(self.news)


@pattern(
    key="observer",
    name="Observer",
    category=PatternCategory.behavioral,
    expected_output=[
        "Jack notified: Tesla opens a new plant",
        "Max notified: Tesla opens a new plant",
        "Max notified: BMW unveils a new model",
    ],
)
def demo(emit: Callable[[str], None] = print) -> None:
    news = AutoNews()
    jack = Reader("Jack", emit)
    max_ = Reader("Max", emit)

    news.subscribe(jack)
    news.subscribe(max_)
    news.set_news("Tesla opens a new plant")

    news.unsubscribe(jack)
    news.set_news("BMW unveils a new model")
