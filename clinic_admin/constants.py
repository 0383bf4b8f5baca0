"""Fixed option catalogues offered by the clinic forms."""

from enum import Enum


class MedicalSpecialty(str, Enum):
    """Specialty codes a doctor can be registered under."""

    ALLERGY_IMMUNOLOGY = "allergy_immunology"
    ANESTHESIOLOGY = "anesthesiology"
    ANGIOLOGY = "angiology"
    CARDIOLOGY = "cardiology"
    CARDIOVASCULAR_SURGERY = "cardiovascular_surgery"
    GENERAL_SURGERY = "general_surgery"
    PLASTIC_SURGERY = "plastic_surgery"
    DERMATOLOGY = "dermatology"
    ENDOCRINOLOGY = "endocrinology"
    GASTROENTEROLOGY = "gastroenterology"
    GERIATRICS = "geriatrics"
    GYNECOLOGY_OBSTETRICS = "gynecology_obstetrics"
    HEMATOLOGY = "hematology"
    INFECTIOUS_DISEASES = "infectious_diseases"
    FAMILY_MEDICINE = "family_medicine"
    SPORTS_MEDICINE = "sports_medicine"
    OCCUPATIONAL_MEDICINE = "occupational_medicine"
    NEPHROLOGY = "nephrology"
    NEUROLOGY = "neurology"
    NEUROSURGERY = "neurosurgery"
    NUTRITION = "nutrition"
    OPHTHALMOLOGY = "ophthalmology"
    ONCOLOGY = "oncology"
    ORTHOPEDICS = "orthopedics"
    OTOLARYNGOLOGY = "otolaryngology"
    PEDIATRICS = "pediatrics"
    PULMONOLOGY = "pulmonology"
    PSYCHIATRY = "psychiatry"
    RADIOLOGY = "radiology"
    RHEUMATOLOGY = "rheumatology"
    UROLOGY = "urology"


MEDICAL_SPECIALTIES: list[dict[str, str]] = [
    {"value": MedicalSpecialty.ALLERGY_IMMUNOLOGY.value, "label": "Allergy & Immunology"},
    {"value": MedicalSpecialty.ANESTHESIOLOGY.value, "label": "Anesthesiology"},
    {"value": MedicalSpecialty.ANGIOLOGY.value, "label": "Angiology"},
    {"value": MedicalSpecialty.CARDIOLOGY.value, "label": "Cardiology"},
    {"value": MedicalSpecialty.CARDIOVASCULAR_SURGERY.value, "label": "Cardiovascular Surgery"},
    {"value": MedicalSpecialty.GENERAL_SURGERY.value, "label": "General Surgery"},
    {"value": MedicalSpecialty.PLASTIC_SURGERY.value, "label": "Plastic Surgery"},
    {"value": MedicalSpecialty.DERMATOLOGY.value, "label": "Dermatology"},
    {"value": MedicalSpecialty.ENDOCRINOLOGY.value, "label": "Endocrinology"},
    {"value": MedicalSpecialty.GASTROENTEROLOGY.value, "label": "Gastroenterology"},
    {"value": MedicalSpecialty.GERIATRICS.value, "label": "Geriatrics"},
    {"value": MedicalSpecialty.GYNECOLOGY_OBSTETRICS.value, "label": "Gynecology & Obstetrics"},
    {"value": MedicalSpecialty.HEMATOLOGY.value, "label": "Hematology"},
    {"value": MedicalSpecialty.INFECTIOUS_DISEASES.value, "label": "Infectious Diseases"},
    {"value": MedicalSpecialty.FAMILY_MEDICINE.value, "label": "Family Medicine"},
    {"value": MedicalSpecialty.SPORTS_MEDICINE.value, "label": "Sports Medicine"},
    {"value": MedicalSpecialty.OCCUPATIONAL_MEDICINE.value, "label": "Occupational Medicine"},
    {"value": MedicalSpecialty.NEPHROLOGY.value, "label": "Nephrology"},
    {"value": MedicalSpecialty.NEUROLOGY.value, "label": "Neurology"},
    {"value": MedicalSpecialty.NEUROSURGERY.value, "label": "Neurosurgery"},
    {"value": MedicalSpecialty.NUTRITION.value, "label": "Nutrition"},
    {"value": MedicalSpecialty.OPHTHALMOLOGY.value, "label": "Ophthalmology"},
    {"value": MedicalSpecialty.ONCOLOGY.value, "label": "Oncology"},
    {"value": MedicalSpecialty.ORTHOPEDICS.value, "label": "Orthopedics"},
    {"value": MedicalSpecialty.OTOLARYNGOLOGY.value, "label": "Otolaryngology"},
    {"value": MedicalSpecialty.PEDIATRICS.value, "label": "Pediatrics"},
    {"value": MedicalSpecialty.PULMONOLOGY.value, "label": "Pulmonology"},
    {"value": MedicalSpecialty.PSYCHIATRY.value, "label": "Psychiatry"},
    {"value": MedicalSpecialty.RADIOLOGY.value, "label": "Radiology"},
    {"value": MedicalSpecialty.RHEUMATOLOGY.value, "label": "Rheumatology"},
    {"value": MedicalSpecialty.UROLOGY.value, "label": "Urology"},
]

SPECIALTY_VALUES = frozenset(option["value"] for option in MEDICAL_SPECIALTIES)

# Sunday=0 ... Saturday=6, keyed by the label the form submits
WEEKDAYS: list[dict[str, str]] = [
    {"value": "0", "label": "Sunday"},
    {"value": "1", "label": "Monday"},
    {"value": "2", "label": "Tuesday"},
    {"value": "3", "label": "Wednesday"},
    {"value": "4", "label": "Thursday"},
    {"value": "5", "label": "Friday"},
    {"value": "6", "label": "Saturday"},
]

WEEKDAY_VALUES = frozenset(day["value"] for day in WEEKDAYS)

DEFAULT_FROM_WEEK_DAY = "1"  # Monday
DEFAULT_TO_WEEK_DAY = "5"  # Friday

# Time palette: 30-minute slots, 05:00 through 23:30
FIRST_SLOT_MINUTES = 5 * 60
LAST_SLOT_MINUTES = 23 * 60 + 30
SLOT_INTERVAL_MINUTES = 30

# Band name and the first slot (in minutes) that no longer belongs to it
TIME_SLOT_BANDS: list[tuple[str, int]] = [
    ("Morning", 13 * 60),
    ("Afternoon", 19 * 60),
    ("Night", 24 * 60),
]
