import pytest

from birdlens_data import (
    SUBJECTS, SENSOR_FORMATS, DIGITAL_CROPS, FULL_FRAME_HEIGHT_MM, DEFAULT_BASE_PARAMS,
    Subject, Sensor, DigitalCrop, get_subject, get_sensor_format, get_digital_crop, subject_help_text
)


def test_catalog_shapes():
    assert len(SUBJECTS) == 3
    assert len(SENSOR_FORMATS) == 2
    assert [c.factor for c in DIGITAL_CROPS] == [1.0, 1.4, 2.0]


def test_catalog_ids_unique():
    assert len({s.id for s in SUBJECTS}) == len(SUBJECTS)
    assert len({s.id for s in SENSOR_FORMATS}) == len(SENSOR_FORMATS)
    assert len({c.factor for c in DIGITAL_CROPS}) == len(DIGITAL_CROPS)


def test_subjects_ordered_small_to_large():
    heights = [s.height_cm for s in SUBJECTS]
    assert heights == sorted(heights)
    assert all(h > 0 for h in heights)


def test_sensor_height_matches_crop_factor():
    for s in SENSOR_FORMATS:
        assert s.crop_factor >= 1.0
        assert s.height_mm == pytest.approx(FULL_FRAME_HEIGHT_MM / s.crop_factor)
    assert Sensor.APSC.value.height_mm == 16.0


def test_crop_factors_never_below_native():
    assert all(c.factor >= 1.0 for c in DIGITAL_CROPS)


def test_lookup():
    assert get_subject("small") is Subject.SMALL.value
    assert get_sensor_format("apsc") is Sensor.APSC.value
    assert get_digital_crop(1.4) is DigitalCrop.X1_4.value


@pytest.mark.parametrize("fn, key", [(get_subject, "huge"), (get_sensor_format, "mft"), (get_digital_crop, 3.0)])
def test_lookup_unknown(fn, key):
    with pytest.raises(KeyError):
        fn(key)


def test_records_are_immutable():
    with pytest.raises(AttributeError):
        SUBJECTS[0].height_cm = 20


def test_default_baseline_resolves():
    assert get_subject(DEFAULT_BASE_PARAMS["subject"])
    assert get_sensor_format(DEFAULT_BASE_PARAMS["sensor"])
    assert get_digital_crop(DEFAULT_BASE_PARAMS["digital_crop"])


def test_help_text_lists_every_subject():
    for s in SUBJECTS:
        assert s.name in subject_help_text
