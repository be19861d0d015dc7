from __future__ import annotations

from typing import List

from pattern_catalog.structural import adapter, bridge, composite, decorator, facade, flyweight, proxy


class TestAdapter:
    def test_adapter_exposes_simple_interface(self) -> None:
        adapted = adapter.EngineV8Adapter(adapter.EngineV8())

        assert adapted.simple_interface() == adapter.EngineV8().complicated_interface()

    def test_demo(self, emit, lines: List[str]) -> None:
        adapter.demo(emit)

        assert lines == ["Engine 2.0 - tr-tr-tr", "Engine V8! - wroom wroom!"]


class TestBridge:
    def test_any_model_with_any_color(self) -> None:
        assert bridge.ModelS(bridge.GrayColor()).paint() == "Model S in gray"
        assert bridge.ModelX(bridge.BlackColor()).paint() == "Model X in black"

    def test_demo(self, emit, lines: List[str]) -> None:
        bridge.demo(emit)

        assert lines == ["Model S in black", "Model X in gray"]


class TestComposite:
    def test_nested_composites_sum_prices(self) -> None:
        toolkit = composite.Composite("toolkit")
        toolkit.add(composite.Tools())
        toolkit.add(composite.Tools())
        car = composite.Car()
        car.add(composite.Engine())
        car.add(toolkit)

        assert toolkit.get_price() == 8000
        assert car.get_price() == 28000
        assert car.part_names() == ["engine", "toolkit"]

    def test_empty_composite_costs_nothing(self) -> None:
        assert composite.Car().get_price() == 0

    def test_demo(self, emit, lines: List[str]) -> None:
        composite.demo(emit)

        assert lines == ["Car parts: engine, body, tools", "Total price: 34000"]


class TestDecorator:
    def test_plain_car(self) -> None:
        car = decorator.Car()

        assert (car.get_price(), car.get_description()) == (10000, "Car")

    def test_decorators_stack_in_any_order(self) -> None:
        car = decorator.Autopilot(decorator.Parktronic(decorator.Tesla()))

        assert car.get_price() == 33000
        assert car.get_description() == "Tesla with parktronic with autopilot"

    def test_demo(self, emit, lines: List[str]) -> None:
        decorator.demo(emit)

        assert lines == ["33000 Tesla with autopilot with parktronic", "30000 Tesla with autopilot"]


class TestFacade:
    def test_facade_runs_steps_in_order(self) -> None:
        steps = facade.ConveyorFacade(facade.Conveyor()).assemble_car()

        assert steps[0] == "Setting up the body"
        assert steps[-1] == "Painting"
        assert len(steps) == 7

    def test_demo(self, emit, lines: List[str]) -> None:
        facade.demo(emit)

        assert lines == facade.ConveyorFacade(facade.Conveyor()).assemble_car()


class TestFlyweight:
    def test_same_model_returns_cached_instance(self) -> None:
        factory = flyweight.AutoFactory()
        first = factory.create("Model S", 80000)
        again = factory.create("Model S", 1)

        assert first is again
        assert again.price == 80000
        assert factory.get_models() == ["Model S"]

    def test_demo(self, emit, lines: List[str]) -> None:
        flyweight.demo(emit)

        assert lines == ["Model S 80000", "Model X 95000", "Model S 80000", "cars created: 2"]


class TestProxy:
    def test_wrong_password_is_denied(self) -> None:
        assert proxy.SecuritySystem(proxy.CarAccess()).open("Jack") == "Access denied!"

    def test_right_password_opens(self) -> None:
        assert proxy.SecuritySystem(proxy.CarAccess()).open("Ilon") == "Opening car door"

    def test_demo(self, emit, lines: List[str]) -> None:
        proxy.demo(emit)

        assert lines == ["Access denied!", "Opening car door", "Closing the car door"]
