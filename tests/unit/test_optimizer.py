"""Tests for bot-bound HTML optimization."""

from bs4 import BeautifulSoup

from visibility.optimizer import OPTIMIZED_MARKER, HTMLOptimizer, OptimizationOptions

PAGE = """<html>
<head>
<title>Page</title>
<script src="/app.js"></script>
<script type="application/ld+json">{"@context": "https://schema.org", "@type": "Organization"}</script>
<link rel="preconnect" href="https://www.google-analytics.com">
<link rel="stylesheet" href="/style.css">
</head>
<body onload="init()">
<nav><a href="/">Home</a><span>-</span><a href="/about">About</a><img src="/logo.png"></nav>
<h1 onclick="track()">Title</h1>
<p>Real content stays.</p>
<div class="ad-slot">Buy things</div>
<div id="sponsored-box">Sponsored</div>
<ins class="adsbygoogle"></ins>
<img src="/pixel.gif" width="1" height="1">
<img src="/photo.jpg" width="600" height="400">
<noscript><img src="https://www.facebook.com/tr?id=1"></noscript>
<script>window.dataLayer = [];</script>
</body>
</html>
"""


def optimize(html: str = PAGE, **options) -> BeautifulSoup:
    return BeautifulSoup(HTMLOptimizer(OptimizationOptions(**options)).optimize(html), "html.parser")


class TestHTMLOptimizer:
    """Tests for HTMLOptimizer."""

    def test_strips_scripts_but_keeps_json_ld(self):
        soup = optimize()

        scripts = soup.find_all("script")
        assert len(scripts) == 1
        assert scripts[0]["type"] == "application/ld+json"

    def test_strips_inline_event_handlers(self):
        soup = optimize()

        assert not soup.body.has_attr("onload")
        assert not soup.h1.has_attr("onclick")

    def test_removes_tracking(self):
        soup = optimize()

        assert soup.find("img", src="/pixel.gif") is None
        assert soup.find("noscript") is None
        assert soup.find("link", href="https://www.google-analytics.com") is None
        assert soup.find("link", href="/style.css") is not None
        assert soup.find("img", src="/photo.jpg") is not None

    def test_removes_ads(self):
        soup = optimize()

        assert soup.find(class_="ad-slot") is None
        assert soup.find(id="sponsored-box") is None
        assert soup.find("ins") is None
        assert soup.find("p").get_text() == "Real content stays."

    def test_adds_marker_comment(self):
        html = HTMLOptimizer().optimize(PAGE)

        assert f"<!--{OPTIMIZED_MARKER}-->" in html

    def test_no_head_no_marker(self):
        html = HTMLOptimizer().optimize("<p>Fragment</p>")

        assert OPTIMIZED_MARKER not in html
        assert "<p>Fragment</p>" in html

    def test_options_disable_steps(self):
        soup = optimize(strip_js=False, remove_ads=False, remove_tracking=False)

        assert len(soup.find_all("script")) == 3
        assert soup.find(class_="ad-slot") is not None
        assert soup.find("img", src="/pixel.gif") is not None

    def test_nav_untouched_by_default(self):
        soup = optimize()

        assert soup.nav.find("img") is not None

    def test_simplify_nav(self):
        soup = optimize(simplify_nav=True)

        nav = soup.nav
        assert [a["href"] for a in nav.find_all("a")] == ["/", "/about"]
        assert nav.find("img") is None
        assert nav.get_text() == "Home | About"
