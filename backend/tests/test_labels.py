import pytest

from app.models.enums import PrefectureStatus, RegionStatus, StoreStatus, Weekday
from app.utils.labels import (
    prefecture_status_label,
    region_status_label,
    store_status_label,
    weekday_label,
    weekday_labels,
)


@pytest.mark.parametrize("status", list(StoreStatus))
def test_every_store_status_has_a_label(status):
    assert store_status_label(status) != ""


def test_store_status_labels():
    assert store_status_label(StoreStatus.PUBLISHED) == "営業中"
    assert store_status_label("editing") == "編集中"
    assert store_status_label(StoreStatus.SUSPENDED) == "閉店"


def test_prefecture_and_region_labels():
    assert prefecture_status_label(PrefectureStatus.PUBLISHED) == "反映中"
    assert prefecture_status_label("suspended") == "停止"
    assert all(region_status_label(s) for s in RegionStatus)


@pytest.mark.parametrize("value", ["closed", "", None, 3, ["published"]])
def test_unknown_values_fall_back_to_empty_string(value):
    assert store_status_label(value) == ""
    assert prefecture_status_label(value) == ""
    assert region_status_label(value) == ""
    assert weekday_label(value) == ""


def test_weekday_labels():
    assert weekday_label(Weekday.SUNDAY) == "日"
    assert weekday_labels(["WEDNESDAY", "SUNDAY"]) == ["水", "日"]
    assert weekday_labels([]) == []
    assert weekday_labels(None) is None
