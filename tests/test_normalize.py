from shipment_qr.utils.normalize import normalize_text


def test_normalize_text_strips_control_chars_and_trims() -> None:
    assert normalize_text("  foo\r\nbar\x07 ") == "foobar"


def test_normalize_text_handles_empty_values() -> None:
    assert normalize_text(None) == ""
    assert normalize_text("") == ""
    assert normalize_text(" \r\n\x07 ") == ""


def test_normalize_text_removes_lone_line_feeds_and_carriage_returns() -> None:
    assert normalize_text("a\nb") == "ab"
    assert normalize_text("a\rb") == "ab"


def test_normalize_text_keeps_separators_and_inner_spaces() -> None:
    assert normalize_text(" A|B^C  D ") == "A|B^C  D"


def test_normalize_text_is_idempotent() -> None:
    samples = ["  foo\r\nbar\x07 ", " \x07 x \n", "לקוח א ", "\t\r\n", "a \x07 "]
    for value in samples:
        once = normalize_text(value)
        assert normalize_text(once) == once
