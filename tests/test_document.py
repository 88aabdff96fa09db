import pytest

from jobpost_extractor.document import HtmlDocument


def test_malformed_markup_does_not_raise():
    doc = HtmlDocument("<div><p>unclosed <b>bold</div></span><li>stray")
    assert doc.select_first("p") is not None
    assert "unclosed" in doc.first_text("p")


def test_empty_document():
    doc = HtmlDocument("")
    assert doc.select_first("h1") is None
    assert doc.first_text("h1") == ""
    assert doc.all_scripts("application/ld+json") == []


def test_text_is_trimmed():
    doc = HtmlDocument("<h1>\n   Data Engineer  \n</h1>")
    assert doc.first_text("h1") == "Data Engineer"


def test_text_of_missing_node():
    assert HtmlDocument.text(None) == ""


def test_attr_joins_multi_valued_attributes():
    doc = HtmlDocument('<div class="job location primary">x</div>')
    node = doc.select_first("div")
    assert doc.attr(node, "class") == "job location primary"
    assert doc.attr(node, "data-id") is None
    assert doc.attr(None, "class") is None


def test_attribute_substring_selector_matches_any_class():
    doc = HtmlDocument('<span class="meta job-location">Lisbon</span>')
    assert doc.first_text('[class*="location"]') == "Lisbon"


def test_html_returns_inner_markup():
    doc = HtmlDocument('<div id="content"><p>Hi</p><ul><li>One</li></ul></div>')
    node = doc.select_first("#content")
    assert doc.html(node) == "<p>Hi</p><ul><li>One</li></ul>"
    assert doc.html(None) is None


def test_reading_does_not_mutate_document():
    doc = HtmlDocument('<div id="content"><p>Hi<br>there</p></div>')
    node = doc.select_first("#content")
    first = doc.html(node)
    doc.text(node)
    assert doc.html(node) == first


def test_all_scripts_filters_by_type():
    doc = HtmlDocument(
        '<script type="application/ld+json">{"a": 1}</script>'
        "<script>var x = 1;</script>"
        '<script type="Application/LD+JSON">{"b": 2}</script>'
        '<script type="text/javascript">var y;</script>'
    )
    scripts = doc.all_scripts("application/ld+json")
    assert [doc.script_text(s) for s in scripts] == ['{"a": 1}', '{"b": 2}']


def test_script_text_keeps_markup_in_json_strings():
    doc = HtmlDocument(
        '<script type="application/ld+json">{"description": "<p>Hello</p>"}</script>'
    )
    (script,) = doc.all_scripts("application/ld+json")
    assert doc.script_text(script) == '{"description": "<p>Hello</p>"}'


def test_first_attr():
    doc = HtmlDocument('<meta property="og:title" content="  Designer ">')
    assert doc.first_attr('meta[property="og:title"]', "content") == "Designer"
    assert doc.first_attr('meta[property="og:image"]', "content") == ""


@pytest.mark.parametrize(
    "markup",
    ["<![", "<!", "<![CDATA[x", "<!DOCTYPE", "<!-- unterminated", "<h1>A</h1><![CDATA[x]]><!x"],
)
def test_declarations_and_cdata_do_not_raise(markup):
    doc = HtmlDocument(markup)
    doc.select_first("h1")
    doc.all_scripts("application/ld+json")
