import logging

import pytest

from wordgraph.config import ObservabilityConfig, get_config, reset_config
from wordgraph.domain.errors import ConfigurationError, DuplicateVertexError, InvalidCapacityError
from wordgraph.graph import Graph
from wordgraph.observability import configure_logging


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = get_config()

    assert config.graph.initial_capacity == 256
    assert config.graph.allow_duplicate_names is True
    assert config.observability.level == "INFO"


def test_graph_uses_configured_capacity(monkeypatch):
    monkeypatch.setenv("WORDGRAPH_GRAPH_INITIAL_CAPACITY", "16")
    reset_config()

    assert Graph().capacity == 16


def test_configured_capacity_is_validated(monkeypatch):
    monkeypatch.setenv("WORDGRAPH_GRAPH_INITIAL_CAPACITY", "0")
    reset_config()

    with pytest.raises(InvalidCapacityError):
        Graph()


def test_graph_uses_configured_duplicate_policy(monkeypatch):
    monkeypatch.setenv("WORDGRAPH_GRAPH_ALLOW_DUPLICATE_NAMES", "false")
    reset_config()

    graph = Graph(capacity=2)
    graph.add_vertex("cat")
    with pytest.raises(DuplicateVertexError):
        graph.add_vertex("cat")


def test_explicit_arguments_override_config(monkeypatch):
    monkeypatch.setenv("WORDGRAPH_GRAPH_INITIAL_CAPACITY", "16")
    monkeypatch.setenv("WORDGRAPH_GRAPH_ALLOW_DUPLICATE_NAMES", "false")
    reset_config()

    graph = Graph(capacity=3, allow_duplicate_names=True)
    graph.add_vertex("cat")
    graph.add_vertex("cat")

    assert graph.capacity == 3
    assert graph.num_vertices == 2


def test_explicit_arguments_skip_broken_environment(monkeypatch):
    monkeypatch.setenv("WORDGRAPH_GRAPH_INITIAL_CAPACITY", "abc")
    reset_config()

    graph = Graph(capacity=4, allow_duplicate_names=True)

    assert graph.capacity == 4


def test_configure_logging_applies_level():
    root = logging.getLogger()
    previous = root.level
    try:
        level = configure_logging(ObservabilityConfig(level="debug"))
        assert level == logging.DEBUG
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError) as excinfo:
        configure_logging(ObservabilityConfig(level="chatty"))
    assert excinfo.value.setting_name == "level"
