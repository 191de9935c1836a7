import pytest

from minirdbms.page import PAGE_SIZE, Page


def test_write_and_read_back():
    page = Page()
    text = "id=1,name=Alice,age=30"
    page.write_data(text)
    assert page.read_data() == text


def test_raw_data_starts_with_written_text():
    page = Page()
    text = "id=1,name=Alice,age=30"
    page.write_data(text)
    raw = page.raw_data()
    assert len(raw) == PAGE_SIZE
    assert raw[: len(text)] == text.encode()
    assert raw[len(text)] == 0


def test_load_raw_data():
    page = Page()
    page.write_data("id=1,name=Alice,age=30")
    page.load_raw(b"id=2,name=Bob,age=40")
    assert page.read_data() == "id=2,name=Bob,age=40"


def test_has_column():
    page = Page()
    page.load_raw(b"id=2,name=Bob,age=40")
    assert page.has_column("name") is True
    assert page.has_column("salary") is False


def test_update_column():
    page = Page()
    page.load_raw(b"id=2,name=Bob,age=40")
    page.update_column("name", "Bobby")
    assert "name=Bobby" in page.read_data()
    assert page.read_data() == "id=2,name=Bobby,age=40"
    assert page.has_column("name")


def test_update_unknown_column_leaves_page_unchanged():
    page = Page()
    page.write_data("id=2,name=Bob")
    page.update_column("salary", "10")
    assert page.read_data() == "id=2,name=Bob"


def test_update_drops_tokens_without_equals():
    page = Page()
    page.write_data("id=2,junk,name=Bob")
    page.update_column("id", "3")
    assert page.read_data() == "id=3,name=Bob"


def test_new_page_is_empty():
    page = Page()
    assert page.read_data() == ""
    assert page.raw_data() == bytes(PAGE_SIZE)


def test_write_truncates_to_leave_terminator():
    page = Page()
    page.write_data("a" * (PAGE_SIZE + 100))
    assert len(page.read_data()) == PAGE_SIZE - 1
    assert page.raw_data()[-1] == 0


def test_write_replaces_previous_longer_text():
    page = Page()
    page.write_data("a much longer record")
    page.write_data("short")
    assert page.read_data() == "short"


def test_load_raw_too_long_raises():
    page = Page()
    with pytest.raises(ValueError):
        page.load_raw(b"x" * (PAGE_SIZE + 1))