from extractor import extract
from previews import facebook_preview, google_preview, linkedin_preview, twitter_preview

URL = "https://www.acme.example:8443/widgets?id=1"


def test_search_preview_falls_back_to_open_graph():
    extracted = extract('<meta property="og:title" content="OG T"><meta property="og:description" content="OG D">')
    preview = google_preview(URL, extracted)

    assert preview.title == "OG T"
    assert preview.description == "OG D"
    assert preview.url == URL


def test_search_preview_defaults():
    preview = google_preview(URL, extract(""))

    assert preview.title == "No title"
    assert preview.description == "No description available"


def test_search_preview_prefers_page_title():
    extracted = extract('<title>Page</title><meta property="og:title" content="OG">')
    assert google_preview(URL, extracted).title == "Page"


def test_facebook_preview_defaults_use_hostname():
    preview = facebook_preview(URL, extract("<title>Page</title>"))

    assert preview.title == "Page"
    assert preview.description == "No description"
    assert preview.image is None
    assert preview.site_name == "www.acme.example"
    assert preview.type == "website"


def test_facebook_preview_prefers_open_graph(complete_page):
    preview = facebook_preview(URL, extract(complete_page))

    assert preview.title == "Handmade widgets for every room in the house"
    assert preview.image == "https://acme.example/og.jpg"
    assert preview.site_name == "Acme"
    assert preview.type == "website"


def test_twitter_preview_chain():
    extracted = extract(
        '<title>Page</title><meta property="og:image" content="https://a.example/og.jpg">'
    )
    preview = twitter_preview(URL, extracted)

    assert preview.card == "summary_large_image"
    assert preview.title == "Page"
    assert preview.description == "No description"
    assert preview.image == "https://a.example/og.jpg"
    assert preview.site is None


def test_twitter_preview_without_any_title():
    assert twitter_preview(URL, extract("")).title == "No title"


def test_twitter_tags_win(complete_page):
    preview = twitter_preview(URL, extract(complete_page))

    assert preview.card == "summary"
    assert preview.title == "Acme Widgets"
    assert preview.description == "Handmade widgets"
    assert preview.image == "https://acme.example/tw.jpg"
    assert preview.site == "@acme"


def test_linkedin_matches_facebook_without_type(complete_page):
    extracted = extract(complete_page)
    linkedin = linkedin_preview(URL, extracted).model_dump(by_alias=True)
    facebook = facebook_preview(URL, extracted).model_dump(by_alias=True)

    assert "type" not in linkedin
    facebook.pop("type")
    assert linkedin == facebook


def test_preview_nulls_are_explicit():
    dumped = twitter_preview(URL, extract("")).model_dump(by_alias=True)

    assert "image" in dumped and dumped["image"] is None
    assert "site" in dumped and dumped["site"] is None
