"""
表示用ラベルの変換

想定外の値でも例外にせず空文字を返す。
"""

from typing import Iterable, List, Optional

from app.models.enums import PrefectureStatus, RegionStatus, StoreStatus, Weekday

STORE_STATUS_LABELS = {
    StoreStatus.PUBLISHED.value: "営業中",
    StoreStatus.EDITING.value: "編集中",
    StoreStatus.SUSPENDED.value: "閉店",
}

PREFECTURE_STATUS_LABELS = {
    PrefectureStatus.PUBLISHED.value: "反映中",
    PrefectureStatus.SUSPENDED.value: "停止",
}

REGION_STATUS_LABELS = {
    RegionStatus.PUBLISHED.value: "反映中",
    RegionStatus.SUSPENDED.value: "停止",
}

WEEKDAY_LABELS = {
    Weekday.SUNDAY.value: "日",
    Weekday.MONDAY.value: "月",
    Weekday.TUESDAY.value: "火",
    Weekday.WEDNESDAY.value: "水",
    Weekday.THURSDAY.value: "木",
    Weekday.FRIDAY.value: "金",
    Weekday.SATURDAY.value: "土",
}


def _lookup(labels: dict, value) -> str:
    # Enum・素の文字列のどちらでも引けるようにする
    key = getattr(value, "value", value)
    try:
        return labels.get(key, "")
    except TypeError:  # unhashable
        return ""


def store_status_label(status) -> str:
    return _lookup(STORE_STATUS_LABELS, status)


def prefecture_status_label(status) -> str:
    return _lookup(PREFECTURE_STATUS_LABELS, status)


def region_status_label(status) -> str:
    return _lookup(REGION_STATUS_LABELS, status)


def weekday_label(weekday) -> str:
    return _lookup(WEEKDAY_LABELS, weekday)


def weekday_labels(weekdays: Optional[Iterable]) -> Optional[List[str]]:
    """曜日の配列をラベルの配列に変換する。未設定(None)はそのまま None。"""
    if weekdays is None:
        return None
    return [weekday_label(w) for w in weekdays]
