"""Tests for logging utilities."""

import logging
from io import StringIO

from densegraph import DiGraph, Graph
from densegraph.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger under the package namespace."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "densegraph.test_module"


def test_get_logger_keeps_package_names():
    """Module names already under densegraph are not prefixed twice."""
    assert get_logger("densegraph.core").name == "densegraph.core"
    assert get_logger().name == "densegraph"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_configure_logging_redirects_output():
    """Test configure_logging sends messages to the given stream."""
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_module")
        logger.debug("Debug message")

        output = stream.getvalue()
        assert "Debug message" in output
        assert "[DEBUG] densegraph.test_module" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG

        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False


def test_phantom_edge_logs_warning():
    """An edge beyond the node count is stored and reported."""
    stream = StringIO()
    try:
        configure_logging(level=logging.WARNING, stream=stream)
        g = Graph()
        g.add_node("a")
        g.add_edge(0, 3)
        assert "beyond node count 1" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_matrix_growth_logged_at_debug():
    """Matrix growth is reported at DEBUG level."""
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        g = DiGraph()
        g.add_nodes_from(range(3))
        g.add_edge(0, 2)
        assert "Grew adjacency matrix from 0 to 3" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)
