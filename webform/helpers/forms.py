"""HTML form extraction utilities.

This module provides helper functions for locating forms in lxml documents
and turning them into requests that can be sent with a ``requests``
session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urljoin, urlsplit, urlunsplit

from banal import ensure_list
from lxml import etree
from requests import Request

from webform.logic.form import Form
from webform.logic.payload import urlencode_pairs

if TYPE_CHECKING:
    from lxml.html import HtmlElement


def find_forms(html: HtmlElement) -> list[Form]:
    """Build a form for every ``<form>`` element in a document.

    Example:
        >>> [form.action for form in find_forms(html)]
        ['/search', '/login']
    """
    return [Form(el) for el in html.iter("form")]


def _first_element(html: HtmlElement, xpath: str) -> HtmlElement | None:
    for match in ensure_list(html.xpath(xpath)):
        # string and number results are not form nodes
        if isinstance(match, etree._Element):
            return match
    return None


def extract_form(
    html: HtmlElement, xpath: str, elements_xpath: str | None = None
) -> Form | None:
    """Locate a form by XPath.

    Args:
        html: HTML element containing the form.
        xpath: XPath expression to locate the form element.
        elements_xpath: Optional XPath of the element holding the form's
            controls, for markup where the ``<form>`` tag does not enclose
            them.

    Returns:
        The parsed form, or None if either element is not found.

    Example:
        >>> form = extract_form(html, './/form[@id="login"]')
        >>> form.build_query()
        [('username', ''), ('password', ''), ('csrf_token', 'abc123')]
    """
    form_node = _first_element(html, xpath)
    if form_node is None:
        return None
    elements = None
    if elements_xpath is not None:
        elements = _first_element(html, elements_xpath)
        if elements is None:
            return None
    return Form(form_node, elements)


def build_request(form: Form, base_url: str) -> Request:
    """Build a request submitting the form's current state.

    The action is resolved against ``base_url``. GET forms carry the query
    in the URL, replacing any query string the action had; other methods
    send the encoded payload as the request body.
    """
    url = urljoin(base_url, form.action or "")
    if form.method == "GET":
        query = urlencode_pairs(form.build_query())
        url = urlunsplit(urlsplit(url)._replace(query=query, fragment=""))
        return Request(form.method, url)
    payload = form.build_payload()
    return Request(form.method, url, data=payload.body, headers=payload.headers)
