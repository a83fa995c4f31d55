"""
Data Loading for the MIMIC-III Clinical Dashboard

Fetches the five pre-processed JSON summaries from a local directory or a
base URL, in parallel, and parses them into typed records.
"""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Type, Union

import requests

from ..config import get_config
from .records import (
    ClinicalDatasets,
    DashboardError,
    DataLoadError,
    DiagnosisRecord,
    MedicationRecord,
    OutcomeRecord,
    StayRecord,
    VitalSample,
    parse_records,
)


logger = logging.getLogger(__name__)


# Dataset name -> (file name, record type), in display order
RESOURCE_FILES: Dict[str, Tuple[str, Type]] = {
    "outcomes": ("patient_outcomes.json", OutcomeRecord),
    "diagnoses": ("diagnosis_distribution.json", DiagnosisRecord),
    "stays": ("stay_duration.json", StayRecord),
    "medications": ("medication_frequency.json", MedicationRecord),
    "vitals": ("lab_value_trends.json", VitalSample),
}


def _is_url(source: Union[str, Path]) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


class ClinicalDataLoader:
    """
    Loader for the dashboard's five JSON resources.

    Features:
    - Local directory or HTTP(S) base URL source
    - Parallel fetch of all resources
    - All-or-nothing join: one failure empties every dataset
    - Error logging with silent degradation
    """

    def __init__(self,
                 source: Optional[Union[str, Path]] = None,
                 max_workers: Optional[int] = None,
                 session: Optional[requests.Session] = None):
        config = get_config()
        self.source = source if source is not None else config.paths.source
        if not _is_url(self.source):
            self.source = Path(self.source)
        self.max_workers = max_workers or config.loader.max_workers
        self.session = session

    @property
    def is_remote(self) -> bool:
        return _is_url(self.source)

    def resource_location(self, filename: str) -> str:
        """Full path or URL of one resource."""
        if self.is_remote:
            return f"{self.source.rstrip('/')}/{filename}"
        return str(self.source / filename)

    def fetch_json(self, filename: str) -> Any:
        """
        Fetch and decode one JSON resource.

        Args:
            filename: Resource file name (e.g. 'patient_outcomes.json')

        Returns:
            Decoded JSON document

        Raises:
            DataLoadError: If the resource is missing, unreachable, or not valid JSON
        """
        location = self.resource_location(filename)

        if self.is_remote:
            getter = self.session.get if self.session is not None else requests.get
            try:
                response = getter(location)
                response.raise_for_status()
                return response.json()
            except requests.RequestException as e:
                raise DataLoadError(f"Could not fetch {location}: {e}") from e
            except (ValueError, RecursionError) as e:
                raise DataLoadError(f"Malformed JSON in {location}: {e}") from e

        path = Path(location)
        if not path.exists():
            raise DataLoadError(f"Data file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            raise DataLoadError(f"Could not read {path}: {e}") from e
        except (ValueError, RecursionError) as e:
            raise DataLoadError(f"Malformed JSON in {path}: {e}") from e

    def load_dataset(self, name: str) -> Tuple[Any, ...]:
        """
        Fetch and parse one named dataset.

        Args:
            name: Dataset name, one of RESOURCE_FILES

        Returns:
            Tuple of records
        """
        if name not in RESOURCE_FILES:
            raise ValueError(f"Unknown dataset: {name}")

        filename, record_type = RESOURCE_FILES[name]
        records = parse_records(self.fetch_json(filename), record_type)
        logger.info(f"Loaded {len(records)} records from {filename}")
        return records

    def load_all(self) -> ClinicalDatasets:
        """
        Load all five datasets in parallel.

        The results are applied together only when every fetch succeeds.
        If any fetch fails the error is logged and every dataset comes
        back empty, including those that loaded fine.

        Returns:
            Settled ClinicalDatasets (loading=False)
        """
        logger.info(f"Loading clinical datasets from {self.source}")

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                name: executor.submit(self.load_dataset, name)
                for name in RESOURCE_FILES
            }
            try:
                results = {name: future.result() for name, future in futures.items()}
            except DashboardError as e:
                logger.error(f"Error loading data: {e}")
                return ClinicalDatasets.empty(error=str(e))

        return ClinicalDatasets(loading=False, **results)

