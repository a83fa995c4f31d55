"""
Clinical Record Types

Typed records for the five pre-processed MIMIC-III summaries, plus the
errors raised while loading or parsing them.
"""

from dataclasses import dataclass, field, fields
from numbers import Real
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar


class DashboardError(Exception):
    """Base class for dashboard data errors."""


class DataLoadError(DashboardError):
    """A resource could not be fetched or decoded (missing file, HTTP error, bad JSON)."""


class DataFormatError(DashboardError):
    """A resource decoded as JSON but does not match the expected record shape."""


R = TypeVar("R", bound="ClinicalRecord")


class ClinicalRecord:
    """
    Mixin for record dataclasses.

    Each field declares its JSON key via ``metadata={'key': ...}`` and
    whether it is numeric via ``metadata={'numeric': True}``.
    """

    @classmethod
    def json_keys(cls) -> List[str]:
        """JSON keys in field order (used as DataFrame columns)."""
        return [f.metadata["key"] for f in fields(cls)]

    @classmethod
    def from_dict(cls: Type[R], raw: Any) -> R:
        """
        Build a record from one decoded JSON object.

        Args:
            raw: Decoded JSON value (expected to be a dict)

        Returns:
            Record instance

        Raises:
            DataFormatError: If a key is missing or a value has the wrong type
        """
        if not isinstance(raw, dict):
            raise DataFormatError(
                f"{cls.__name__}: expected an object, got {type(raw).__name__}"
            )

        values = {}
        for f in fields(cls):
            key = f.metadata["key"]
            if key not in raw:
                raise DataFormatError(f"{cls.__name__}: missing field '{key}'")
            value = raw[key]
            if f.metadata.get("numeric"):
                # bool is a Real subclass; JSON true/false is not a count
                if isinstance(value, bool) or not isinstance(value, Real):
                    raise DataFormatError(
                        f"{cls.__name__}: field '{key}' must be a number, got {value!r}"
                    )
            elif not isinstance(value, str):
                raise DataFormatError(
                    f"{cls.__name__}: field '{key}' must be a string, got {value!r}"
                )
            values[f.name] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Record as a JSON-style dict (camelCase keys)."""
        return {f.metadata["key"]: getattr(self, f.name) for f in fields(self)}


def _text(key: str):
    return field(metadata={"key": key})


def _number(key: str):
    return field(metadata={"key": key, "numeric": True})


@dataclass(frozen=True)
class OutcomeRecord(ClinicalRecord):
    """Survival counts for one age group."""
    age_group: str = _text("ageGroup")
    survived: float = _number("survived")
    deceased: float = _number("deceased")


@dataclass(frozen=True)
class DiagnosisRecord(ClinicalRecord):
    """Patient count for one diagnosis."""
    name: str = _text("name")
    value: float = _number("value")


@dataclass(frozen=True)
class StayRecord(ClinicalRecord):
    """Mean length of stay (days) for one service."""
    service: str = _text("service")
    days: float = _number("days")


@dataclass(frozen=True)
class MedicationRecord(ClinicalRecord):
    """Administration count for one medication."""
    name: str = _text("name")
    count: float = _number("count")


@dataclass(frozen=True)
class VitalSample(ClinicalRecord):
    """Vital signs at one hour offset."""
    hour: float = _number("hour")
    heart_rate: float = _number("heartRate")
    o2_saturation: float = _number("o2Saturation")
    blood_pressure: float = _number("bloodPressure")
    glucose: float = _number("glucose")


def parse_records(payload: Any, record_type: Type[R]) -> Tuple[R, ...]:
    """
    Parse a decoded JSON array into a tuple of records.

    Args:
        payload: Decoded JSON document
        record_type: Record class for every element

    Returns:
        Tuple of records in file order

    Raises:
        DataFormatError: If the payload is not an array or any element is invalid
    """
    if not isinstance(payload, list):
        raise DataFormatError(
            f"{record_type.__name__}: expected a JSON array, got {type(payload).__name__}"
        )
    return tuple(record_type.from_dict(item) for item in payload)


@dataclass(frozen=True)
class ClinicalDatasets:
    """
    The five datasets shown by the dashboard.

    ``loading`` is True only for the placeholder used before the loader
    settles. ``error`` is set when the loader fell back to empty data.
    """
    outcomes: Tuple[OutcomeRecord, ...] = ()
    diagnoses: Tuple[DiagnosisRecord, ...] = ()
    stays: Tuple[StayRecord, ...] = ()
    medications: Tuple[MedicationRecord, ...] = ()
    vitals: Tuple[VitalSample, ...] = ()
    loading: bool = False
    error: Optional[str] = None

    @classmethod
    def empty(cls, error: Optional[str] = None) -> "ClinicalDatasets":
        """Settled, all-empty datasets (the failure branch of the loader)."""
        return cls(loading=False, error=error)

    @property
    def is_empty(self) -> bool:
        return not any((self.outcomes, self.diagnoses, self.stays,
                        self.medications, self.vitals))
