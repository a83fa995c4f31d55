"""Pytest fixtures for dashboard tests."""

import json

import pytest

from src.data_processing.records import (
    DiagnosisRecord,
    OutcomeRecord,
    VitalSample,
)


RAW_OUTCOMES = [
    {"ageGroup": "18-30", "survived": 120, "deceased": 10},
    {"ageGroup": "31-50", "survived": 200, "deceased": 30},
    {"ageGroup": "51-70", "survived": 310, "deceased": 90},
    {"ageGroup": "70+", "survived": 150, "deceased": 100},
]

RAW_DIAGNOSES = [
    {"name": "Sepsis", "value": 40},
    {"name": "Pneumonia", "value": 35},
    {"name": "Heart Failure", "value": 25},
]

RAW_STAYS = [
    {"service": "MICU", "days": 4.0},
    {"service": "SICU", "days": 2.0},
]

RAW_MEDICATIONS = [
    {"name": "Insulin", "count": 500},
    {"name": "Heparin", "count": 320},
]

RAW_VITALS = [
    {"hour": h, "heartRate": 80 + h, "o2Saturation": 95, "bloodPressure": 120 - h, "glucose": 130}
    for h in range(24)
]

RAW_FILES = {
    "patient_outcomes.json": RAW_OUTCOMES,
    "diagnosis_distribution.json": RAW_DIAGNOSES,
    "stay_duration.json": RAW_STAYS,
    "medication_frequency.json": RAW_MEDICATIONS,
    "lab_value_trends.json": RAW_VITALS,
}


@pytest.fixture
def raw_files() -> dict:
    """File name -> decoded JSON payload for all five resources."""
    return {name: list(payload) for name, payload in RAW_FILES.items()}


@pytest.fixture
def data_dir(tmp_path, raw_files):
    """Temporary directory holding all five JSON resources."""
    for name, payload in raw_files.items():
        (tmp_path / name).write_text(json.dumps(payload), encoding="utf-8")
    return tmp_path


@pytest.fixture
def outcomes():
    return tuple(OutcomeRecord.from_dict(r) for r in RAW_OUTCOMES)


@pytest.fixture
def diagnoses():
    return tuple(DiagnosisRecord.from_dict(r) for r in RAW_DIAGNOSES)


@pytest.fixture
def vitals():
    return tuple(VitalSample.from_dict(r) for r in RAW_VITALS)
