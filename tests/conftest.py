import pytest

TITLE = "Acme Widgets | Handmade Widgets Since 1999"
DESCRIPTION = (
    "Acme builds handmade widgets for homes and offices. Browse the full catalog, "
    "compare models, and order online with free shipping on every order."
)
OG_TITLE = "Handmade widgets for every room in the house"
OG_DESCRIPTION = "Browse the Acme catalog of handmade widgets and order online with free shipping."

COMPLETE_PAGE = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{TITLE}</title>
  <meta name="description" content="{DESCRIPTION}">
  <meta name="robots" content="index, follow">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link rel="canonical" href="https://acme.example/widgets">
  <meta property="og:title" content="{OG_TITLE}">
  <meta property="og:description" content="{OG_DESCRIPTION}">
  <meta property="og:image" content="https://acme.example/og.jpg">
  <meta property="og:url" content="https://acme.example/widgets">
  <meta property="og:type" content="website">
  <meta property="og:site_name" content="Acme">
  <meta name="twitter:card" content="summary">
  <meta name="twitter:title" content="Acme Widgets">
  <meta name="twitter:description" content="Handmade widgets">
  <meta name="twitter:image" content="https://acme.example/tw.jpg">
  <meta name="twitter:site" content="@acme">
</head>
<body><h1>Widgets</h1></body>
</html>
"""

TITLE_ONLY_PAGE = "<html><head><title>Example</title></head><body></body></html>"


@pytest.fixture
def complete_page() -> str:
    return COMPLETE_PAGE


@pytest.fixture
def title_only_page() -> str:
    return TITLE_ONLY_PAGE
