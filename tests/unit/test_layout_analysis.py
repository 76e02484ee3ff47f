import random

from paperflow.converter.layout_analysis import detect_columns
from paperflow.converter.models import NormalizedItem

PAGE_W = 800.0


def _item(text, x, y, width=250.0, height=10.0):
    return NormalizedItem(text=text, x=x, y=y, width=width, height=height)


def _two_column_items(n_left=15, n_right=15):
    left = [_item(f"L{i}", 50, 700 - i * 12) for i in range(n_left)]
    right = [_item(f"R{i}", 450, 700 - i * 12) for i in range(n_right)]
    return left, right


def test_two_columns_detected_above_item_floor():
    left, right = _two_column_items(11, 11)
    bucket = detect_columns(left + right, PAGE_W)
    assert bucket.layout == "two"
    assert len(bucket.left) == 11
    assert len(bucket.right) == 11
    assert bucket.span == ()


def test_ten_items_on_one_side_is_single_column():
    left, right = _two_column_items(15, 10)
    bucket = detect_columns(left + right, PAGE_W)
    assert bucket.layout == "single"
    assert len(bucket.left) == 25
    assert bucket.right == () and bucket.span == ()


def test_single_column_is_ordered_top_to_bottom():
    left, right = _two_column_items(15, 3)
    items = left + right
    random.Random(7).shuffle(items)
    bucket = detect_columns(items, PAGE_W)
    ys = [it.y for it in bucket.left]
    assert ys == sorted(ys, reverse=True)


def test_wide_and_straddling_items_are_span():
    left, right = _two_column_items()
    title = _item("Title", 100, 760, width=600)
    straddle = _item("Center", 300, 740, width=200)  # crosses 400 +/- 64
    bucket = detect_columns(left + right + [title, straddle], PAGE_W)
    assert bucket.is_two_column
    assert {it.text for it in bucket.span} == {"Title", "Center"}


def test_items_inside_center_margin_still_bucketed():
    # right edge 450 < 400 + 64 -> left; x 350 > 400 - 64 -> right
    near_left = _item("nl", 200, 500, width=250)
    near_right = _item("nr", 350, 500, width=300)
    bucket = detect_columns([near_left, near_right], PAGE_W)
    # too few items for two columns, but both survive the merge
    assert {it.text for it in bucket.left} == {"nl", "nr"}
