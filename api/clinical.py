"""
Clinical Data API Layer

Facade over the data loader and analytics used by the dashboard page.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from src.data_processing.loader import ClinicalDataLoader, RESOURCE_FILES
from src.data_processing.records import ClinicalDatasets


class ClinicalDataAPI:
    """
    API for the dashboard's clinical datasets.

    Loads the five pre-processed JSON summaries and derives the headline
    metrics shown above the overview charts.
    """

    @classmethod
    def load_datasets(cls, source: Optional[Union[str, Path]] = None) -> ClinicalDatasets:
        """
        Load all five datasets (all-or-nothing).

        Args:
            source: Local directory or base URL; defaults to the configured source

        Returns:
            ClinicalDatasets; all empty with ``error`` set if any resource failed
        """
        return ClinicalDataLoader(source=source).load_all()

    @classmethod
    def get_resource_files(cls) -> Dict[str, str]:
        """Dataset name -> expected JSON file name."""
        return {name: filename for name, (filename, _) in RESOURCE_FILES.items()}

    @classmethod
    def get_summary_metrics(cls, datasets: ClinicalDatasets) -> Dict[str, Any]:
        """
        Headline metrics for the overview tab.

        Returns:
            Dict with total_patients, mortality_rate (percent),
            mean_stay_days (None without stay data) and diagnosis_count
        """
        survived = sum(r.survived for r in datasets.outcomes)
        deceased = sum(r.deceased for r in datasets.outcomes)
        total = survived + deceased

        mean_stay = None
        if datasets.stays:
            mean_stay = sum(r.days for r in datasets.stays) / len(datasets.stays)

        return {
            'total_patients': total,
            'mortality_rate': (deceased / total * 100) if total else 0.0,
            'mean_stay_days': mean_stay,
            'diagnosis_count': len({r.name for r in datasets.diagnoses}),
        }
