from enum import Enum
from typing import NamedTuple

# --- CONFIGURATION & CONSTANTS ---
NORMAL_FOCAL_MM = 50.0     # "1x" human-vision reference lens
FULL_FRAME_HEIGHT_MM = 24.0
MAX_FILL_PCT = 200.0
TARGET_FILL_PCT = 55.0     # middle of the optimal composition band

FOCAL_MIN_MM, FOCAL_MAX_MM, FOCAL_STEP_MM = 70, 800, 10
DISTANCE_MIN_M, DISTANCE_MAX_M, DISTANCE_STEP_M = 5, 100, 1


class SubjectProfile(NamedTuple):
    id: str
    name: str
    height_cm: float
    color: str


class SensorFormat(NamedTuple):
    id: str
    name: str
    crop_factor: float
    height_mm: float


class DigitalCropOption(NamedTuple):
    factor: float
    label: str


# SUBJECT DATABASE (heights in cm)
class Subject(Enum):
    SMALL = SubjectProfile("small", "Kingfisher (Small)", 16.0, "#3b82f6")
    MEDIUM = SubjectProfile("medium", "Teal (Medium)", 38.0, "#10b981")
    LARGE = SubjectProfile("large", "Grey Heron (Large)", 95.0, "#64748b")


# SENSOR DATABASE
class Sensor(Enum):
    FF = SensorFormat("ff", "Full Frame", 1.0, FULL_FRAME_HEIGHT_MM)
    APSC = SensorFormat("apsc", "APS-C (1.5x)", 1.5, FULL_FRAME_HEIGHT_MM / 1.5)


class DigitalCrop(Enum):
    NATIVE = DigitalCropOption(1.0, "1x (native)")
    X1_4 = DigitalCropOption(1.4, "1.4x")
    X2 = DigitalCropOption(2.0, "2x")


SUBJECTS = tuple(s.value for s in Subject)
SENSOR_FORMATS = tuple(s.value for s in Sensor)
DIGITAL_CROPS = tuple(c.value for c in DigitalCrop)


def get_subject(subject_id):
    for s in SUBJECTS:
        if s.id == subject_id:
            return s
    raise KeyError(f"Unknown subject '{subject_id}', expected one of {[s.id for s in SUBJECTS]}")


def get_sensor_format(sensor_id):
    for s in SENSOR_FORMATS:
        if s.id == sensor_id:
            return s
    raise KeyError(f"Unknown sensor format '{sensor_id}', expected one of {[s.id for s in SENSOR_FORMATS]}")


def get_digital_crop(factor):
    for c in DIGITAL_CROPS:
        if c.factor == factor:
            return c
    raise KeyError(f"Unknown digital crop {factor}, expected one of {[c.factor for c in DIGITAL_CROPS]}")


# BASELINE SETUP (DEFAULT REFERENCE)
DEFAULT_BASE_PARAMS = {
    "subject": Subject.SMALL.value.id,
    "sensor": Sensor.FF.value.id,
    "digital_crop": DigitalCrop.NATIVE.value.factor,
    "focal": 400,
    "distance": 20,
}

subject_help_text = """
| Subject | Height (cm) | Height (in) |
| :--- | :---: | :---: |
"""
for s in SUBJECTS:
    subject_help_text += f"| {s.name} | {s.height_cm:g} | {s.height_cm / 2.54:.1f} |\n"
