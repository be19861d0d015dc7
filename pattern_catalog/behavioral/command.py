"""Command turns a request into an object. The driver executes commands
without knowing what they do, keeps a history of them and can undo the last
one."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List

from pattern_catalog.catalog import PatternCategory, pattern


class Engine:
    def __init__(self) -> None:
        self.state = False

    def on(self) -> str:
        self.state = True
        return "engine on"

    def off(self) -> str:
        self.state = False
        return "engine off"


class Command(ABC):
    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @abstractmethod
    def execute(self) -> str: ...

    @abstractmethod
    def undo(self) -> str: ...


class OnStartCommand(Command):
    def execute(self) -> str:
        return self.engine.on()

    def undo(self) -> str:
        return self.engine.off()


class OnSwitchOffCommand(Command):
    def execute(self) -> str:
        return self.engine.off()

    def undo(self) -> str:
        return self.engine.on()


class Driver:
    def __init__(self) -> None:
        self.history: List[Command] = []

    def execute(self, command: Command) -> str:
        self.history.append(command)
        return command.execute()

    def undo(self) -> str:
        if not self.history:
            raise IndexError("no command to undo")
        return self.history.pop().undo()


@pattern(
    key="command",
    name="Command",
    category=PatternCategory.behavioral,
    expected_output=["engine on", "engine off", "undo: engine on"],
)
def demo(emit: Callable[[str], None] = print) -> None:
    engine = Engine()
    driver = Driver()
    emit(driver.execute(OnStartCommand(engine)))
    emit(driver.execute(OnSwitchOffCommand(engine)))
    emit(f"undo: {driver.undo()}")
