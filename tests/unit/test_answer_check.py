"""Tests for the answer front-loading check."""

from visibility.analyzer.answer import check_answer_front_loading
from visibility.analyzer.document import ParsedDocument
from visibility.analyzer.models import IssueType, Severity


def run(html: str):
    return check_answer_front_loading(ParsedDocument(html))


class TestAnswerFrontLoading:
    """Tests for check_answer_front_loading."""

    def test_no_h1(self):
        """Test page without a principal heading scores zero."""
        result = run("<p>A widget is a small mechanical part used in assembly.</p>")

        assert result.score == 0
        assert len(result.issues) == 1
        assert result.issues[0].type == IssueType.ANSWER_PLACEMENT
        assert result.issues[0].severity == Severity.HIGH
        assert result.issues[0].message == "No H1 tag found on the page"

    def test_direct_answer_after_h1(self):
        """Test a direct early answer scores 95 with no issues."""
        result = run(
            "<h1>Widgets</h1><p>A widget is a small mechanical part used in assembly.</p>"
        )

        assert result.score == 95
        assert result.issues == []

    def test_short_paragraph(self):
        """Test paragraph under 30 characters is not a substantive answer."""
        result = run("<h1>Widgets</h1><p>Widgets are great.</p>")

        assert result.score == 20
        assert result.issues[0].severity == Severity.HIGH
        assert result.issues[0].message == "No substantive paragraph found after H1"

    def test_missing_paragraph(self):
        result = run("<h1>Widgets</h1><div>Nothing to see here at all, really nothing.</div>")

        assert result.score == 20

    def test_no_answer_words(self):
        """Test paragraph that never states what the topic is."""
        result = run(
            "<h1>Widgets</h1><p>Our catalogue covers fasteners, brackets, and clamps for you.</p>"
        )

        assert result.score == 55
        issue = result.issues[0]
        assert issue.severity == Severity.MEDIUM
        assert issue.message == "First paragraph may not directly answer the page topic"
        assert '"widgets is..."' in issue.fix

    def test_answer_word_matches_inside_words(self):
        """Test answer words match as substrings ("this" contains "is")."""
        result = run(
            "<h1>Widgets</h1><p>Read this before you order fasteners for your workshop.</p>"
        )

        assert result.score == 95

    def test_answer_too_far_down(self):
        """Test answer beyond the first 20% of the body text."""
        filler = "filler text " * 60
        html = (
            f"<html><body><div>{filler}</div>"
            "<main><h1>Guide</h1><p>This guide is the quickest way to learn the basics.</p></main>"
            "</body></html>"
        )
        result = run(html)

        assert result.score == 65
        assert result.issues[0].message == "Main answer appears too far down the page"

    def test_main_container_takes_precedence(self):
        """Test paragraphs outside the main container are ignored when one exists."""
        html = (
            "<main><h1>Widgets</h1><div>No paragraph here</div></main>"
            "<p>A widget is a small mechanical part used in assembly.</p>"
        )
        result = run(html)

        assert result.score == 20

    def test_article_container(self):
        html = (
            "<article><h1>Widgets</h1><div>Hi</div>"
            "<p>A widget is a small mechanical part used in assembly.</p></article>"
        )
        result = run(html)

        assert result.score == 95

    def test_next_paragraph_sibling_of_h1(self):
        """Test without a main container the next <p> sibling of the H1 is used."""
        html = (
            "<h1>Widgets</h1><div>Hi</div>"
            "<p>A widget is a small mechanical part used in assembly.</p>"
        )
        result = run(html)

        assert result.score == 95
