# File: tests/test_aggregator.py
from web_archiver.aggregator import SECTION_SEPARATOR, CorpusAggregator
from web_archiver.crawler.models import ExtractedPage


def test_first_title_wins(project_log):
    agg = CorpusAggregator()
    assert agg.save(ExtractedPage("FAQ", "first"))
    assert not agg.save(ExtractedPage("FAQ", "second"))
    assert agg.sections == ["FAQ\n\nfirst"]
    assert "Skipped duplicate title: FAQ" in project_log.text


def test_titles_compared_verbatim():
    agg = CorpusAggregator()
    for title in ("FAQ", "faq", "FAQ ", ""):
        assert agg.save(ExtractedPage(title, "x"))
    assert len(agg) == 4
    assert not agg.save(ExtractedPage("", "y"))


def test_content_joins_with_separator():
    agg = CorpusAggregator()
    agg.save(ExtractedPage("Home", "Hello World"))
    agg.save(ExtractedPage("About", "About Us"))
    assert SECTION_SEPARATOR == "\n\n---\n\n"
    assert agg.json() == {"content": "Home\n\nHello World\n\n---\n\nAbout\n\nAbout Us"}


def test_empty_corpus():
    assert CorpusAggregator().content() == ""
