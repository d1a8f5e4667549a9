# File: tests/test_frontier.py
import pytest

from web_archiver.crawler.frontier import Frontier, should_crawl


def test_should_crawl():
    assert should_crawl("https://example.com/", set())
    assert not should_crawl("https://example.com/", {"https://example.com/"})
    # identity is the exact string
    assert should_crawl("https://example.com", {"https://example.com/"})


def test_fifo_order():
    frontier = Frontier(["a"])
    frontier.enqueue_new(["b", "c"])
    frontier.push("d")
    assert [frontier.pop() for _ in range(4)] == ["a", "b", "c", "d"]
    assert not frontier
    with pytest.raises(IndexError):
        frontier.pop()


def test_enqueue_skips_visited_only():
    frontier = Frontier()
    frontier.mark_visited("a")
    added = frontier.enqueue_new(["a", "b", "b"])
    assert added == 2
    assert len(frontier) == 2
    assert frontier.visited == {"a"}
