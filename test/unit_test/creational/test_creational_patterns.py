from __future__ import annotations

from typing import List

import pytest

from pattern_catalog.creational import abstract_factory, builder, factory_method, prototype, singleton
from pattern_catalog.errors import UnknownProductError


class TestAbstractFactory:
    def test_each_factory_builds_a_matching_family(self) -> None:
        tesla = abstract_factory.TeslaFactory().assemble()
        bmw = abstract_factory.BmwFactory().assemble()

        assert isinstance(tesla.engine, abstract_factory.ElectricEngine)
        assert isinstance(bmw.engine, abstract_factory.PetrolEngine)

    def test_get_factory_is_case_insensitive(self) -> None:
        assert isinstance(abstract_factory.get_factory("TESLA"), abstract_factory.TeslaFactory)

    def test_unknown_brand(self) -> None:
        with pytest.raises(UnknownProductError) as exc:
            abstract_factory.get_factory("lada")
        assert exc.value.kind == "lada"

    def test_demo(self, emit, lines: List[str]) -> None:
        abstract_factory.demo(emit)

        assert lines == ["Tesla Model S with electric engine", "BMW X5 with petrol engine"]


class TestFactoryMethod:
    @pytest.mark.parametrize(
        "kind,cls",
        [("tesla", factory_method.Tesla), ("BMW", factory_method.Bmw), ("audi", factory_method.Audi)],
    )
    def test_create_returns_requested_product(self, kind: str, cls) -> None:
        assert type(factory_method.CarFactory().create(kind)) is cls

    def test_unknown_kind_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown product type: 'lada'"):
            factory_method.CarFactory().create("lada")

    def test_demo(self, emit, lines: List[str]) -> None:
        factory_method.demo(emit)

        assert lines == ["Tesla Model 3", "BMW X5", "Audi A8"]


class TestBuilder:
    def test_defaults(self) -> None:
        car = builder.CarBuilder("Plain").build()

        assert (car.autopilot, car.parktronic, car.signaling, car.engine) == (False, False, False, "V6")

    def test_chained_steps_configure_the_same_car(self) -> None:
        car_builder = builder.CarBuilder("Tesla")

        assert car_builder.add_signaling() is car_builder
        car = car_builder.add_autopilot().update_engine("V12").build()
        assert car.signaling and car.autopilot
        assert car.engine == "V12"

    def test_demo(self, emit, lines: List[str]) -> None:
        builder.demo(emit)

        assert lines == ["Tesla: autopilot=True, parktronic=True, signaling=False, engine=V8"]


class TestPrototype:
    def test_clone_is_independent(self) -> None:
        original = prototype.TeslaCar("Model S", 80000, "red", False)
        clone = original.produce()

        clone.interior = "white"
        assert clone is not original
        assert original.interior == "red"
        assert (clone.model, clone.price, clone.autopilot) == ("Model S", 80000, False)

    def test_demo(self, emit, lines: List[str]) -> None:
        prototype.demo(emit)

        assert lines == ["Model S 80000 red", "Model S 80000 red", "clone is a new object: True"]


class TestSingleton:
    @pytest.fixture(autouse=True)
    def _fresh_instance(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(singleton.Database, "_instance", None)

    def test_first_construction_wins(self) -> None:
        first = singleton.Database("postgres")
        second = singleton.Database("sqlite")

        assert first is second
        assert second.get_data() == "postgres"

    def test_demo(self, emit, lines: List[str]) -> None:
        singleton.demo(emit)

        assert lines == ["mongo", "mongo", "same instance: True"]

    def test_demo_ignores_an_earlier_instance(self, emit, lines: List[str]) -> None:
        singleton.Database("postgres")

        singleton.demo(emit)

        assert lines == ["mongo", "mongo", "same instance: True"]

    def test_demo_runs_twice_with_the_same_output(self, registry) -> None:
        assert registry.run("singleton").matches
        assert registry.run("singleton").matches

    def test_reset_forgets_the_instance(self) -> None:
        first = singleton.Database("postgres")
        singleton.Database.reset()

        assert singleton.Database("sqlite") is not first
