"""
Tests for Polars DataFrame export
"""

import polars as pl
from elbow_router.exporters import export_to_dataframe, export_summary_to_dataframe


class TestVertexDataFrame:
    """Test suite for export_to_dataframe"""

    def test_one_row_per_vertex(self, sample_results):
        df = export_to_dataframe(sample_results)

        assert df.height == 6
        assert df.filter(pl.col('connector_id') == 'straight')['kind'].to_list() == ['start', 'end']

        elbow = df.filter(pl.col('connector_id') == 'elbow')
        assert elbow['kind'].to_list() == ['start', 'departure', 'arrival', 'end']
        assert elbow['vertex_index'].to_list() == [0, 1, 2, 3]
        assert elbow['x'].to_list() == [0.0, 100.0, 100.0, 200.0]
        assert elbow['y'].to_list() == [0.0, 0.0, 40.0, 40.0]

    def test_corner_kinds(self):
        results = [{
            'connector_id': 'search',
            'start': [0.0, 0.0],
            'end': [200.0, 100.0],
            'points': [[0.0, 0.0], [100.0, 0.0], [100.0, 60.0]],
            'turns': 1,
        }]

        df = export_to_dataframe(results)

        assert df['kind'].to_list() == ['start', 'departure', 'corner', 'arrival', 'end']

    def test_single_intermediate_point(self):
        """Test one intermediate point is labelled by position and the end keeps its label"""
        results = [{
            'connector_id': 'single',
            'start': [0.0, 0.0],
            'end': [100.0, 60.0],
            'points': [[100.0, 0.0]],
            'turns': 1,
        }]

        df = export_to_dataframe(results)

        assert df['kind'].to_list() == ['start', 'corner', 'end']
        assert df['x'].to_list() == [0.0, 100.0, 100.0]
        assert df['y'].to_list() == [0.0, 0.0, 60.0]

    def test_failed_results_have_no_vertices(self, sample_results, failed_result):
        df = export_to_dataframe(sample_results + [failed_result])

        assert 'broken' not in df['connector_id'].to_list()

    def test_empty_schema(self):
        df = export_to_dataframe([])

        assert df.height == 0
        assert df.columns == ['connector_id', 'vertex_index', 'kind', 'x', 'y']
        assert df['x'].dtype == pl.Float64


class TestSummaryDataFrame:
    """Test suite for export_summary_to_dataframe"""

    def test_one_row_per_connector(self, sample_results, failed_result):
        df = export_summary_to_dataframe(sample_results + [failed_result])

        assert df['connector_id'].to_list() == ['straight', 'elbow', 'broken']
        assert df['is_straight'].to_list() == [True, False, None]
        assert df['turns'].to_list() == [0, 2, None]
        assert df['point_count'].to_list() == [0, 2, None]
        assert df['error'].null_count() == 2
        assert df['end_x'].to_list() == [100.0, 200.0, None]

    def test_empty_schema(self):
        df = export_summary_to_dataframe([])

        assert df.height == 0
        assert 'is_straight' in df.columns
