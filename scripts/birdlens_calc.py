import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from birdlens_data import MAX_FILL_PCT, NORMAL_FOCAL_MM, SensorFormat, SubjectProfile

logger = logging.getLogger(__name__)


# --- ERRORS ---
class SimulationError(Exception):
    """Base class for calculation failures."""


class InvalidArgument(SimulationError, ValueError):
    """Negative, non-finite, or zero where a positive value is required."""


class DivisionByZero(SimulationError, ZeroDivisionError):
    """Distance, sensor height or digital crop factor is zero."""


# --- TYPES ---
@dataclass(frozen=True)
class SimulationInput:
    focal_length_mm: float
    distance_m: float
    sensor_format: SensorFormat
    digital_crop_factor: float
    subject: SubjectProfile


class SimulationResult(NamedTuple):
    equivalent_focal_length_mm: float
    fill_percentage: float
    magnification: float


class MagnificationTier(Enum):
    HANDHELD = ("General handheld binoculars range (8x/10x)", "pass")
    HIGH_POWER = ("High-magnification binoculars / stabilization recommended", "warn")
    SCOPE_LOW = ("Spotting scope, low-power end", "info")
    SCOPE_HIGH = ("Spotting scope high-power / astronomical grade", "info")

    def __init__(self, label, status):
        self.label = label
        self.status = status


class CompositionTier(Enum):
    TOO_SMALL = ("Subject too small (< 10%). Try a digital crop or get closer.", "fail")
    ENVIRONMENTAL = ("Environmental composition (10-30%). Good for showing habitat.", "warn")
    OPTIMAL = ("Optimal composition (30-80%). Rich detail with comfortable framing.", "pass")
    CLOSE_UP = ("Tight close-up / frame filling (> 80%). Suited to head portraits.", "info")

    def __init__(self, label, status):
        self.label = label
        self.status = status


# --- VALIDATION ---
def _check(name, value, zero_error=InvalidArgument):
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be finite, got {value}")
    if value < 0:
        raise InvalidArgument(f"{name} must not be negative, got {value}")
    if value == 0:
        raise zero_error(f"{name} must be greater than zero")


# --- CALCULATION LOGIC ---
def total_crop_factor(sensor_crop, digital_crop):
    return sensor_crop * digital_crop


def simulate(focal_length_mm: float, distance_m: float, subject_height_cm: float,
             sensor_height_mm: float, sensor_crop_factor: float = 1.0,
             digital_crop_factor: float = 1.0) -> SimulationResult:
    """Frame fill, equivalent focal length and magnification for one setup.

    Uses the proportional (pinhole) projection: the subject's image height on
    the sensor is focal * object / distance. The physical focal length is used
    for the projection because the sensor height is physical too; the crop
    factors only enter the equivalent focal length and, for the digital crop,
    the read-out sensor height.
    """
    _check("focal_length_mm", focal_length_mm)
    _check("distance_m", distance_m, DivisionByZero)
    _check("subject_height_cm", subject_height_cm)
    _check("sensor_height_mm", sensor_height_mm, DivisionByZero)
    _check("sensor_crop_factor", sensor_crop_factor)
    _check("digital_crop_factor", digital_crop_factor, DivisionByZero)

    equivalent = focal_length_mm * total_crop_factor(sensor_crop_factor, digital_crop_factor)

    object_mm = subject_height_cm * 10
    distance_mm = distance_m * 1000
    image_mm = (focal_length_mm * object_mm) / distance_mm

    effective_sensor_mm = sensor_height_mm / digital_crop_factor
    raw_fill = (image_mm / effective_sensor_mm) * 100
    fill = min(raw_fill, MAX_FILL_PCT)
    if raw_fill > MAX_FILL_PCT:
        logger.debug("Frame fill %.1f%% clamped to %.0f%%", raw_fill, MAX_FILL_PCT)

    magnification = equivalent / NORMAL_FOCAL_MM

    logger.debug("f=%smm d=%sm h=%scm sensor=%smm crop=%sx/%sx -> equiv=%.1fmm fill=%.2f%% mag=%.2fx",
                 focal_length_mm, distance_m, subject_height_cm, sensor_height_mm,
                 sensor_crop_factor, digital_crop_factor, equivalent, fill, magnification)
    return SimulationResult(equivalent, fill, magnification)


def compute_simulation(sim: SimulationInput) -> SimulationResult:
    return simulate(sim.focal_length_mm, sim.distance_m, sim.subject.height_cm,
                    sim.sensor_format.height_mm, sim.sensor_format.crop_factor,
                    sim.digital_crop_factor)


# --- CLASSIFICATION ---
def classify_magnification(value: float) -> MagnificationTier:
    if math.isnan(value):
        raise InvalidArgument("magnification must not be NaN")
    if value <= 10:
        return MagnificationTier.HANDHELD
    if value <= 20:
        return MagnificationTier.HIGH_POWER
    if value <= 60:
        return MagnificationTier.SCOPE_LOW
    return MagnificationTier.SCOPE_HIGH


def classify_composition(percentage: float) -> CompositionTier:
    if math.isnan(percentage):
        raise InvalidArgument("fill percentage must not be NaN")
    if percentage < 10:
        return CompositionTier.TOO_SMALL
    if percentage < 30:
        return CompositionTier.ENVIRONMENTAL
    if percentage <= 80:
        return CompositionTier.OPTIMAL
    return CompositionTier.CLOSE_UP


# --- FRAMING HELPERS ---
def is_overfilled(fill):
    return fill > 100


def format_fill(fill):
    if is_overfilled(fill):
        return ">100"
    return f"{fill:.1f}"


def distance_for_fill(target_pct, focal_length_mm, subject_height_cm, sensor_height_mm, digital_crop_factor=1.0):
    """Distance (m) at which the subject fills target_pct of the frame height."""
    for name, v in (("target_pct", target_pct), ("focal_length_mm", focal_length_mm),
                    ("subject_height_cm", subject_height_cm), ("sensor_height_mm", sensor_height_mm),
                    ("digital_crop_factor", digital_crop_factor)):
        _check(name, v)
    effective_sensor_mm = sensor_height_mm / digital_crop_factor
    # fill = f * h / (d * s_eff) * 100  =>  d = f * h * 100 / (fill * s_eff)
    distance_mm = (focal_length_mm * subject_height_cm * 10 * 100) / (target_pct * effective_sensor_mm)
    return distance_mm / 1000


def focal_length_for_fill(target_pct, distance_m, subject_height_cm, sensor_height_mm, digital_crop_factor=1.0):
    """Focal length (mm) at which the subject fills target_pct of the frame height."""
    for name, v in (("target_pct", target_pct), ("distance_m", distance_m),
                    ("subject_height_cm", subject_height_cm), ("sensor_height_mm", sensor_height_mm),
                    ("digital_crop_factor", digital_crop_factor)):
        _check(name, v)
    effective_sensor_mm = sensor_height_mm / digital_crop_factor
    return (target_pct / 100) * effective_sensor_mm * (distance_m * 1000) / (subject_height_cm * 10)


def snap_to_range(value, lo, hi, step):
    """Clamp to [lo, hi] and round to the nearest slider step."""
    value = min(max(value, lo), hi)
    snapped = lo + round((value - lo) / step) * step
    return int(min(snapped, hi))
