import pytest
from lxml import html as lxml_html

from webform.logic.form import Form

LOGIN_PAGE = """
<html><body>
<form name="login" action="/login" method="post">
  <input type="text" name="user" value="alice">
  <input type="password" name="pass">
  <input type="hidden" name="token" value="abc">
  <!-- decoration -->
  <input type="checkbox" name="remember" checked>
  <input type="checkbox" name="newsletter" value="weekly">
  <input type="radio" name="color" value="red" checked>
  <input type="radio" name="color" value="blue">
  <input type="email" name="mail" value="a@example.com">
  <textarea name="bio">Hello world</textarea>
  <select name="lang">
    <option value="en">English</option>
    <option selected>Deutsch</option>
  </select>
  <input type="submit" name="go" value="Go">
  <input type="image" name="map">
  <input type="file" name="doc" value="cv.pdf">
</form>
<form action="/search"><input name="q"></form>
</body></html>
"""


def parse_html(text):
    return lxml_html.fromstring(text)


@pytest.fixture(scope="function")
def page():
    return parse_html(LOGIN_PAGE)


@pytest.fixture(scope="function")
def make_form():
    """Factory building a form from a markup snippet."""

    def _make_form(text, elements_xpath=None):
        root = parse_html(text)
        form = root if root.tag == "form" else root.find(".//form")
        elements = None
        if elements_xpath is not None:
            elements = root.xpath(elements_xpath)[0]
        return Form(form, elements)

    return _make_form


@pytest.fixture(scope="function")
def form(page):
    """Fresh login form for each test function, since forms are mutable."""
    return Form(page.find(".//form"))
