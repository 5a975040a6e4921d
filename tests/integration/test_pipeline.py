"""Integration tests -- the whole pipeline with the network stubbed out."""

from unittest.mock import patch

import pytest

import main
from opensearch2nix.errors import (
    DescriptorLinkNotFoundError,
    DuplicateFieldError,
    FetchError,
    MalformedDescriptorError,
    NoUrlsDefinedError,
)
from opensearch2nix.pipeline import build_graph, generate_nix
from opensearch2nix.utils.logger import set_log_level
from opensearch2nix.utils.config import settings

WEBSITE = "https://example.com/"
DESCRIPTOR_URL = "https://example.com/opensearch.xml"

PAGE = """<!DOCTYPE html>
<html>
  <head>
    <title>Example</title>
    <link rel="stylesheet" href="/style.css">
    <link rel="search" type="application/opensearchdescription+xml" href="/opensearch.xml">
  </head>
  <body><p>hello</p></body>
</html>
"""

DESCRIPTOR = """<?xml version="1.0"?>
<OpenSearchDescription xmlns="http://a9.com/-/spec/opensearch/1.1/">
    <ShortName>Test</ShortName>
    <Image height="16" width ="16" type="image/x-icon">https://example.com/16.ico</Image>
    <Image height="32" width ="32" type="image/x-icon">https://example.com/32.ico</Image>
    <Url type="text/html" template="https://example.com/search?q={searchTerms}" />
    <Description>Hi there</Description>
    <Url type="application/x-suggestions+json" template="https://example.com/json?q={searchTerms}" />
    <Url type="application/x-suggestions+xml" template="https://example.com/xml" />
</OpenSearchDescription>
"""

EXPECTED = "\n".join([
    '"Test" = {',
    "    urls = [",
    '        { template = "https://example.com/search"; type = "text/html";',
    '          params = [ { name = "q"; value = "{searchTerms}"; } ]; }',
    '        { template = "https://example.com/json"; type = "application/x-suggestions+json";',
    '          params = [ { name = "q"; value = "{searchTerms}"; } ]; }',
    '        { template = "https://example.com/xml"; type = "application/x-suggestions+xml"; }',
    "    ];",
    '    iconUpdateURL = "https://example.com/32.ico";',
    '    description = "Hi there";',
    "};",
])


def _fake_fetch(pages: dict):
    fetched = []

    def fetch(url, timeout=None):
        fetched.append(url)
        if url not in pages:
            raise FetchError(f"failed to fetch {url}: 404")
        return pages[url]

    fetch.fetched = fetched
    return fetch


def _run(pages: dict) -> str:
    with patch("opensearch2nix.pipeline.nodes.fetch_page", _fake_fetch(pages)):
        return generate_nix(WEBSITE, build_graph())


def test_end_to_end():
    assert _run({WEBSITE: PAGE, DESCRIPTOR_URL: DESCRIPTOR}) == EXPECTED


def test_fetches_are_sequential_page_then_descriptor():
    fake = _fake_fetch({WEBSITE: PAGE, DESCRIPTOR_URL: DESCRIPTOR})
    with patch("opensearch2nix.pipeline.nodes.fetch_page", fake):
        generate_nix(WEBSITE)
    assert fake.fetched == [WEBSITE, DESCRIPTOR_URL]


def test_graph_state_carries_intermediate_values():
    with patch(
        "opensearch2nix.pipeline.nodes.fetch_page",
        _fake_fetch({WEBSITE: PAGE, DESCRIPTOR_URL: DESCRIPTOR}),
    ):
        result = build_graph().invoke({"website_url": WEBSITE})
    assert result["descriptor_url"] == DESCRIPTOR_URL
    assert result["descriptor"].short_name == "Test"
    assert len(result["descriptor"].urls) == 3
    assert result["icon"].width == 32


def test_page_fetch_failure():
    with pytest.raises(FetchError):
        _run({})


def test_descriptor_fetch_failure():
    with pytest.raises(FetchError):
        _run({WEBSITE: PAGE})


def test_page_without_link():
    page = "<html><head><title>x</title></head><body></body></html>"
    with pytest.raises(DescriptorLinkNotFoundError):
        _run({WEBSITE: page, DESCRIPTOR_URL: DESCRIPTOR})


def test_malformed_descriptor():
    with pytest.raises(MalformedDescriptorError):
        _run({WEBSITE: PAGE, DESCRIPTOR_URL: "<OpenSearchDescription>"})


def test_duplicate_short_name():
    doubled = DESCRIPTOR.replace(
        "<ShortName>Test</ShortName>",
        "<ShortName>Test</ShortName><ShortName>Again</ShortName>",
    )
    with pytest.raises(DuplicateFieldError):
        _run({WEBSITE: PAGE, DESCRIPTOR_URL: doubled})


def test_descriptor_without_urls():
    bare = (
        "<OpenSearchDescription><ShortName>Test</ShortName>"
        "<Description>Hi there</Description></OpenSearchDescription>"
    )
    with pytest.raises(NoUrlsDefinedError):
        _run({WEBSITE: PAGE, DESCRIPTOR_URL: bare})


class TestCli:
    def test_success_prints_nix(self, capsys):
        fake = _fake_fetch({WEBSITE: PAGE, DESCRIPTOR_URL: DESCRIPTOR})
        with patch("opensearch2nix.pipeline.nodes.fetch_page", fake):
            code = main.main([WEBSITE])
        assert code == 0
        assert capsys.readouterr().out == EXPECTED + "\n"

    def test_failure_exits_non_zero(self, capsys):
        page = "<html><head></head><body></body></html>"
        with patch("opensearch2nix.pipeline.nodes.fetch_page", _fake_fetch({WEBSITE: page})):
            code = main.main([WEBSITE])
        captured = capsys.readouterr()
        assert code == 1
        assert captured.out == ""
        assert "DescriptorLinkNotFoundError" in captured.err

    def test_relative_url_is_usage_error(self):
        with pytest.raises(SystemExit) as excinfo:
            main.main(["/just/a/path"])
        assert excinfo.value.code == 2

    def test_verbose_still_prints_nix(self, capsys):
        fake = _fake_fetch({WEBSITE: PAGE, DESCRIPTOR_URL: DESCRIPTOR})
        try:
            with patch("opensearch2nix.pipeline.nodes.fetch_page", fake):
                code = main.main(["--verbose", WEBSITE])
        finally:
            set_log_level(settings.log_level)
        assert code == 0
        assert EXPECTED in capsys.readouterr().out
