"""Tests for the clinical data API facade."""

import pytest

from api import ClinicalDataAPI
from src.data_processing.records import ClinicalDatasets, StayRecord


class TestLoadDatasets:

    def test_loads_from_directory(self, data_dir):
        data = ClinicalDataAPI.load_datasets(source=data_dir)
        assert not data.is_empty
        assert data.loading is False

    def test_missing_directory_degrades_to_empty(self, tmp_path):
        data = ClinicalDataAPI.load_datasets(source=tmp_path / "nowhere")
        assert data.is_empty
        assert data.error is not None

    def test_resource_files(self):
        files = ClinicalDataAPI.get_resource_files()
        assert files["vitals"] == "lab_value_trends.json"
        assert len(files) == 5


class TestSummaryMetrics:

    def test_metrics(self, outcomes, diagnoses):
        data = ClinicalDatasets(
            outcomes=outcomes,
            diagnoses=diagnoses,
            stays=(StayRecord("MICU", 4.0), StayRecord("SICU", 2.0)),
        )
        metrics = ClinicalDataAPI.get_summary_metrics(data)

        survived = sum(r.survived for r in outcomes)
        deceased = sum(r.deceased for r in outcomes)
        assert metrics["total_patients"] == survived + deceased
        assert metrics["mortality_rate"] == pytest.approx(deceased / (survived + deceased) * 100)
        assert metrics["mean_stay_days"] == pytest.approx(3.0)
        assert metrics["diagnosis_count"] == len(diagnoses)

    def test_empty_data(self):
        metrics = ClinicalDataAPI.get_summary_metrics(ClinicalDatasets.empty())
        assert metrics["total_patients"] == 0
        assert metrics["mortality_rate"] == 0.0
        assert metrics["mean_stay_days"] is None
        assert metrics["diagnosis_count"] == 0
