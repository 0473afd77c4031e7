import pytest

from app.core.severity import CONDITIONS, assess_vitals, derive_condition, derive_severity


def test_all_readings_absent_is_stable():
    assert derive_severity() == 3
    assert derive_condition(3) == "Stable"


@pytest.mark.parametrize(
    ("readings", "expected"),
    [
        ({"heart_rate": 121}, 5),
        ({"heart_rate": 49}, 5),
        ({"heart_rate": 120}, 3),
        ({"heart_rate": 50}, 3),
        ({"spo2": 89}, 6),
        ({"spo2": 90}, 4),
        ({"spo2": 93.9}, 4),
        ({"spo2": 94}, 3),
        ({"resp_rate": 26}, 5),
        ({"resp_rate": 9}, 5),
        ({"resp_rate": 25}, 3),
        ({"resp_rate": 10}, 3),
        ({"temperature": 39.1}, 4),
        ({"temperature": 34.9}, 4),
        ({"temperature": 39}, 3),
        ({"temperature": 35}, 3),
        ({"systolic": 181}, 5),
        ({"systolic": 89}, 5),
        ({"systolic": 180}, 3),
        ({"systolic": 90}, 3),
        ({"diastolic": 111}, 4),
        ({"diastolic": 110}, 3),
    ],
)
def test_single_reading_thresholds(readings, expected):
    assert derive_severity(**readings) == expected


def test_spo2_bands_are_exclusive():
    # <90 scores only the lower band
    assert derive_severity(spo2=85) == 6


def test_zero_reading_is_treated_as_absent():
    assert derive_severity(heart_rate=0, spo2=0, resp_rate=0, temperature=0, systolic=0) == 3


def test_deltas_add_independently():
    assert derive_severity(heart_rate=130, spo2=88) == 8
    assert derive_severity(spo2=85, resp_rate=30) == 8
    assert derive_severity(temperature=40, diastolic=120) == 5


def test_score_is_capped_at_ten():
    score = derive_severity(
        heart_rate=140, spo2=80, resp_rate=35, temperature=40, systolic=200, diastolic=120
    )
    assert score == 10


@pytest.mark.parametrize(
    ("score", "label"),
    [
        (10, "Critical"),
        (8, "Critical"),
        (7, "Serious"),
        (5, "Serious"),
        (4, "Stable"),
        (3, "Stable"),
        (2, "Recovering"),
        (0, "Recovering"),
    ],
)
def test_condition_labels(score, label):
    assert derive_condition(score) == label


def test_assessment_stays_in_range_and_matches_label():
    heart_rates = [None, 0, 45, 80, 125]
    saturations = [None, 85, 92, 98]
    systolics = [None, 80, 120, 190]
    for heart_rate in heart_rates:
        for spo2 in saturations:
            for systolic in systolics:
                score, condition = assess_vitals(
                    heart_rate=heart_rate,
                    spo2=spo2,
                    resp_rate=30,
                    temperature=40,
                    systolic=systolic,
                    diastolic=115,
                )
                assert 0 <= score <= 10
                assert condition in CONDITIONS
                assert condition == derive_condition(score)
