"""
Shared pytest fixtures and utilities for testing
"""

import logging

import pytest
import polars as pl

from elbow_router.routing.path_optimizer import is_orthogonal, has_reversal


@pytest.fixture
def sample_results():
    """Route results covering a straight and an elbow connector"""
    return [
        {
            'connector_id': 'straight',
            'start': [0.0, 0.0],
            'end': [100.0, 0.0],
            'points': [],
            'turns': 0,
        },
        {
            'connector_id': 'elbow',
            'start': [0.0, 0.0],
            'end': [200.0, 40.0],
            'points': [[100.0, 0.0], [100.0, 40.0]],
            'turns': 2,
        },
    ]


@pytest.fixture
def failed_result():
    """Route result for a connector that could not be routed"""
    return {
        'connector_id': 'broken',
        'start': [None, 0.0],
        'end': [10.0, 10.0],
        'points': [],
        'turns': 0,
        'error': 'start coordinates must be numbers, got: (None, 0.0)',
    }


@pytest.fixture
def sample_connectors_df():
    """Connector endpoints as a DataFrame"""
    return pl.DataFrame({
        'connector_id': ['straight', 'elbow', 'vertical', 'tall'],
        'start_x': [0.0, 0.0, 0.0, 0.0],
        'start_y': [0.0, 0.0, 0.0, 0.0],
        'end_x': [100.0, 200.0, 0.0, 40.0],
        'end_y': [0.0, 40.0, 100.0, 200.0],
    })


@pytest.fixture
def connectors_csv(tmp_path, sample_connectors_df):
    """Connector endpoints written to a CSV file"""
    path = tmp_path / 'connectors.csv'
    sample_connectors_df.write_csv(str(path))
    return path


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run in an empty directory with no discoverable config"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path / 'xdg'))
    monkeypatch.delenv('ELBOW_OUTPUT_DIR', raising=False)
    return tmp_path


@pytest.fixture
def restore_logging():
    """Remove and close any handlers a test adds to the root logger"""
    root_logger = logging.getLogger()
    initial_handlers = list(root_logger.handlers)
    initial_level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in initial_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(initial_level)


# Helper functions for tests

def assert_orthogonal(points):
    """Assert every segment of a polyline is horizontal or vertical"""
    assert is_orthogonal(points), f"Polyline has a diagonal or zero-length segment: {points}"


def assert_no_reversal(points):
    """Assert a polyline never doubles back on itself"""
    assert not has_reversal(points), f"Polyline doubles back: {points}"


def get_result_by_id(results, connector_id):
    """Get a specific route result by connector id"""
    for result in results:
        if result['connector_id'] == connector_id:
            return result
    return None
