import pytest

from webform.exc import ConflictError
from webform.logic.query import build_query, radio_groups


class TestBuildQuery:
    def test_scenario(self, make_form):
        form = make_form(
            "<form><input name='user' value='alice'>"
            "<input type='checkbox' name='remember' checked>"
            "<input type='radio' name='color' value='red' checked>"
            "<input type='radio' name='color' value='blue'></form>"
        )
        assert build_query(form) == [
            ("user", "alice"),
            ("remember", "on"),
            ("color", "red"),
        ]

    def test_full_order(self, form):
        form.click("go")
        assert form.build_query() == [
            ("user", "alice"),
            ("pass", ""),
            ("token", "abc"),
            ("bio", "Hello world"),
            ("lang", "Deutsch"),
            ("remember", "on"),
            ("color", "red"),
            ("go", "Go"),
        ]

    def test_group_order_not_document_order(self, make_form):
        form = make_form(
            "<form><input type='radio' name='r' value='1' checked>"
            "<input type='checkbox' name='c' value='x' checked>"
            "<input name='f' value='v'></form>"
        )
        assert build_query(form) == [("f", "v"), ("c", "x"), ("r", "1")]

    def test_null_field_excluded(self, form):
        form.set_field("pass", None)
        form.set_field("token", "")
        query = build_query(form)
        assert "pass" not in [name for name, _ in query]
        assert ("token", "") in query

    def test_unchecked_checkbox_excluded(self, form):
        names = [name for name, _ in build_query(form)]
        assert "newsletter" not in names
        form.check("newsletter")
        assert ("newsletter", "weekly") in build_query(form)


class TestRadioGroups:
    def test_groups(self, make_form):
        form = make_form(
            "<form><input type='radio' name='a' value='1'>"
            "<input type='radio' name='b' value='2'>"
            "<input type='radio' name='a' value='3'></form>"
        )
        groups = radio_groups(form.radiobuttons)
        assert list(groups) == ["a", "b"]
        assert [r.value for r in groups["a"]] == ["1", "3"]

    def test_none_checked(self, form):
        form.radiobutton("color", "red").checked = False
        assert "color" not in [name for name, _ in build_query(form)]

    def test_exactly_one_pair(self, form):
        form.choose("color", "blue")
        query = build_query(form)
        assert [p for p in query if p[0] == "color"] == [("color", "blue")]

    def test_value_defaults_to_empty(self, make_form):
        form = make_form("<form><input type='radio' name='r' checked></form>")
        assert build_query(form) == [("r", "")]

    def test_conflict(self, form):
        form.radiobutton("color", "blue").checked = True
        with pytest.raises(ConflictError) as exc:
            build_query(form)
        assert exc.value.name == "color"

    def test_conflict_from_markup(self, make_form):
        form = make_form(
            "<form><input type='radio' name='r' value='1' checked>"
            "<input type='radio' name='r' value='2' checked></form>"
        )
        with pytest.raises(ConflictError):
            form.build_payload()


class TestButtons:
    def test_unclicked_buttons_excluded(self, form):
        names = [name for name, _ in build_query(form)]
        assert "go" not in names
        assert "map" not in names

    def test_click_order(self, form):
        form.click("map", x=5, y=7)
        form.click("go")
        assert build_query(form)[-4:] == [
            ("map", ""),
            ("map.x", "5"),
            ("map.y", "7"),
            ("go", "Go"),
        ]

    def test_image_default_coordinates(self, form):
        form.click("map")
        assert build_query(form)[-2:] == [("map.x", "0"), ("map.y", "0")]

    def test_nameless_button(self, make_form):
        form = make_form(
            "<form><input type='submit' value='Send'><input type='image'></form>"
        )
        for button in form.buttons:
            form.click(button)
        assert build_query(form) == []
