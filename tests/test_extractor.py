from evaluator import evaluate_tags
from extractor import extract
from schemas import RawTag


def test_extracts_dedicated_fields(complete_page):
    extracted = extract(complete_page)

    assert extracted["title"] == "Acme Widgets | Handmade Widgets Since 1999"
    assert extracted["charset"] == "utf-8"
    assert extracted["canonical"] == "https://acme.example/widgets"


def test_named_and_property_lookups(complete_page):
    extracted = extract(complete_page)

    assert extracted["named"]["robots"] == "index, follow"
    assert extracted["named"]["twitter:site"] == "@acme"
    assert extracted["propertied"]["og:site_name"] == "Acme"
    assert "og:title" not in extracted["named"]


def test_attribute_order_does_not_matter():
    name_first = extract('<meta name="description" content="X">')
    content_first = extract('<meta content="X" name="description">')

    assert name_first["named"]["description"] == "X"
    assert content_first["named"]["description"] == "X"


def test_first_match_wins():
    html = '<meta name="robots" content="noindex"><meta name="robots" content="index">'
    assert extract(html)["named"]["robots"] == "noindex"


def test_meta_without_content_is_skipped_for_lookup():
    html = '<meta name="description"><meta name="description" content="Second">'
    assert extract(html)["named"]["description"] == "Second"


def test_empty_content_is_reported_as_none():
    extracted = extract('<meta name="description" content="">')
    assert extracted["named"]["description"] is None


def test_tag_and_attribute_names_are_case_insensitive():
    html = '<META NAME="viewport" CONTENT="width=device-width"><TITLE> Hi </TITLE>'
    extracted = extract(html)

    assert extracted["named"]["viewport"] == "width=device-width"
    assert extracted["title"] == "Hi"


def test_attribute_values_are_case_sensitive():
    extracted = extract('<meta name="Description" content="X">')
    assert "description" not in extracted["named"]


def test_title_entities_are_not_unescaped():
    assert extract("<title>Fish &amp; Chips</title>")["title"] == "Fish &amp; Chips"
    title = "Caf&eacute; &mdash; Menu &quot;Daily&quot; &#39;26"
    assert extract(f"<title>{title}</title>")["title"] == title


def test_title_character_count_uses_source_text():
    tags = evaluate_tags(extract("<title>Caf&eacute;</title>"))

    assert tags.title.content == "Caf&eacute;"
    assert tags.title.character_count == 11


def test_title_with_attributes_and_line_breaks():
    assert extract('<title lang="en">\n  Hello\n</title>')["title"] == "Hello"


def test_blank_title_is_none():
    assert extract("<title>   </title>")["title"] is None


def test_charset_from_http_equiv():
    html = '<meta http-equiv="Content-Type" content="text/html; charset=ISO-8859-1">'
    assert extract(html)["charset"] == "ISO-8859-1"


def test_meta_charset_wins_over_http_equiv():
    html = (
        '<meta http-equiv="content-type" content="text/html; charset=latin1">'
        '<meta charset="utf-8">'
    )
    assert extract(html)["charset"] == "utf-8"


def test_canonical_rel_is_case_insensitive():
    html = '<link href="https://a.example/" rel="Canonical">'
    assert extract(html)["canonical"] == "https://a.example/"


def test_canonical_with_empty_href_is_ignored():
    assert extract('<link rel="canonical" href="">')["canonical"] is None


def test_raw_tags_order_and_synthetic_entries():
    html = (
        '<link rel="canonical" href="https://a.example/">'
        "<title>Page</title>"
        '<meta charset="utf-8">'
        '<meta property="og:title" content="OG">'
        '<meta name="robots" content="index">'
        '<meta name="robots" content="index">'
        '<meta name="keywords">'
    )
    raw_tags = extract(html)["raw_tags"]

    assert raw_tags == [
        RawTag(name="title", content="Page"),
        RawTag(name="charset", content="utf-8"),
        RawTag(name="og:title", content="OG", property="og:title"),
        RawTag(name="robots", content="index"),
        RawTag(name="robots", content="index"),
        RawTag(name="canonical", content="https://a.example/"),
    ]


def test_malformed_markup_never_raises():
    for html in ["", "<meta", '<meta name="description content=>', "<title>", "<<<>>>", None]:
        extracted = extract(html)
        assert extracted["named"].get("description") is None
        assert extracted["canonical"] is None


def test_empty_document_yields_empty_result():
    extracted = extract("")

    assert extracted["title"] is None
    assert extracted["charset"] is None
    assert extracted["named"] == {}
    assert extracted["propertied"] == {}
    assert extracted["raw_tags"] == []
