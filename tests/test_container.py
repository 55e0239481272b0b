import pytest

from roadnet.adapters.rendering import FixedWidthTableRenderer
from roadnet.adapters.source import FileEdgeSource
from roadnet.config import AppConfig, DisplayConfig
from roadnet.container import Container
from roadnet.ports.rendering import MatrixRendererPort
from roadnet.ports.source import EdgeSourcePort
from roadnet.services import TransportationNetwork


def test_default_bindings():
    container = Container.create_default()

    assert isinstance(container.resolve(EdgeSourcePort), FileEdgeSource)
    assert isinstance(container.resolve(MatrixRendererPort), FixedWidthTableRenderer)
    assert isinstance(container.resolve(TransportationNetwork), TransportationNetwork)


def test_networks_are_independent_but_share_adapters():
    container = Container.create_default()
    first = container.resolve(TransportationNetwork)
    second = container.resolve(TransportationNetwork)

    assert first is not second
    assert first.source is second.source
    first.load_lines(["A,B,1"])
    assert second.vertices() is None


def test_config_override_reaches_adapters():
    config = AppConfig(display=DisplayConfig(cell_width=9))
    container = Container.create_default(config)
    assert container.resolve(MatrixRendererPort).config.cell_width == 9


def test_register_fake_port():
    container = Container()
    fake = object()
    container.register(EdgeSourcePort, lambda: fake)

    assert container.is_registered(EdgeSourcePort)
    assert container.resolve(EdgeSourcePort) is fake


def test_non_singleton_creates_new_instances():
    container = Container()
    container.register(list, list, singleton=False)
    assert container.resolve(list) is not container.resolve(list)


def test_reregistering_drops_cached_singleton():
    container = Container()
    container.register(dict, lambda: {"v": 1})
    assert container.resolve(dict) == {"v": 1}
    container.register(dict, lambda: {"v": 2})
    assert container.resolve(dict) == {"v": 2}


def test_unregistered_type_raises():
    container = Container()
    with pytest.raises(KeyError):
        container.resolve(dict)


def test_clear_singletons():
    container = Container()
    container.register(list, list)
    first = container.resolve(list)
    container.clear_singletons()
    assert container.resolve(list) is not first
