from promptdeck import helpers as h


def test_wrap_in_json_block():
    assert h.wrap_in_json_block('{"key": "value"}') == '```json\n{"key": "value"}\n```'


def test_join_with_newlines_skips_missing_and_empty():
    assert h.join_with_newlines(["first", None, "second", "", "third"]) == (
        "first\n\nsecond\n\nthird"
    )


def test_join_with_newlines_empty():
    assert h.join_with_newlines([]) == ""
    assert h.join_with_newlines([None, None]) == ""


def test_format_provider_content():
    assert h.format_provider_content("body", "Title") == "# Title\nbody"
    assert h.format_provider_content("body") == "body"
    assert h.format_provider_content("body", "") == "body"
