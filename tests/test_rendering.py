"""
Tests for Markdown rendering and sanitization.
"""
import pytest

from miniblog.rendering import render_markdown


class TestRenderMarkdown:
    """Tests for render_markdown."""

    def test_basic_markdown(self):
        html = render_markdown("Some **bold** and *italic* text")
        assert html == "<p>Some <strong>bold</strong> and <em>italic</em> text</p>"

    def test_empty_body(self):
        assert render_markdown("") == ""

    def test_deterministic(self):
        source = "# Title\n\n- one\n- two\n\n[link](https://example.com)"
        assert render_markdown(source) == render_markdown(source)

    def test_raw_html_block_is_escaped(self):
        html = render_markdown("<script>alert(1)</script>")
        assert "<script" not in html
        assert "&lt;script&gt;" in html

    def test_inline_html_is_escaped(self):
        html = render_markdown('Look <img src="x" onerror="alert(1)"> here')
        assert "<img" not in html
        assert "&lt;img" in html

    def test_javascript_link_loses_href(self):
        html = render_markdown("[click](javascript:void)")
        assert "<a>click</a>" in html
        assert "href" not in html

    def test_data_image_loses_src(self):
        html = render_markdown("![pic](data:image/svg+xml;base64,AAAA)")
        assert "data:" not in html
        assert 'alt="pic"' in html

    def test_safe_links_are_kept(self):
        html = render_markdown(
            '[home](https://example.com "Home") [rel](/posts/1/) [mail](mailto:a@example.com)'
        )
        assert '<a href="https://example.com" title="Home">home</a>' in html
        assert '<a href="/posts/1/">rel</a>' in html
        assert '<a href="mailto:a@example.com">mail</a>' in html

    def test_fenced_code_is_escaped(self):
        html = render_markdown("```\n<b>hi</b>\n```")
        assert "<pre><code>" in html
        assert "&lt;b&gt;hi&lt;/b&gt;" in html
        assert "<b>" not in html

    def test_tables_extension(self):
        html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |")
        assert "<table>" in html
        assert "<td>1</td>" in html

    def test_disallowed_tag_is_unwrapped(self, settings):
        settings.MINIBLOG = {"MARKDOWN_ALLOWED_TAGS": ["p"]}
        html = render_markdown("# Title\n\nSome **bold** text")
        assert "<h1>" not in html
        assert "<strong>" not in html
        assert "Title" in html
        assert "<p>Some bold text</p>" in html

    def test_allowed_schemes_are_configurable(self, settings):
        settings.MINIBLOG = {"MARKDOWN_ALLOWED_SCHEMES": ["https"]}
        html = render_markdown("[plain](http://example.com) [secure](https://example.com)")
        assert "http://example.com" not in html
        assert '<a href="https://example.com">secure</a>' in html

    @pytest.mark.parametrize("url", [
        "&#106;avascript:alert(1)",
        "&#x6A;avascript:alert(1)",
        "javascript&#58;alert(1)",
        "&#x6a;ava&#x73;cript&colon;alert(1)",
    ])
    def test_entity_encoded_javascript_link_loses_href(self, url):
        html = render_markdown(f"[x]({url})")
        assert "<a>x</a>" in html
        assert "href" not in html

    @pytest.mark.parametrize("url", [
        "&#106;avascript:alert(1)",
        "&#x6A;avascript:alert(1)",
        "javascript&#58;alert(1)",
    ])
    def test_entity_encoded_javascript_image_loses_src(self, url):
        html = render_markdown(f"![p]({url})")
        assert "src" not in html
        assert 'alt="p"' in html

    def test_double_encoded_reference_is_rejected(self):
        html = render_markdown("[x](&amp;#106;avascript:alert(1))")
        assert "href" not in html

    def test_query_string_ampersand_is_kept(self):
        html = render_markdown("[q](https://example.com/?a=1&b=2)")
        assert 'href="https://example.com/?a=1&amp;b=2"' in html
