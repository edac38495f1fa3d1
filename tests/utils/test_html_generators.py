"""Tests for map UI HTML generators."""

from quake_map.utils.html_generators import generate_error_banner, generate_title_block


class TestGenerateErrorBanner:
    """Tests for generate_error_banner()."""

    def test_empty_when_no_errors(self):
        assert generate_error_banner({}) == ''

    def test_one_line_per_failed_feed(self):
        html = generate_error_banner({
            'Earthquakes': 'Request failed: 503',
            'Tectonic Plates': 'Request timed out after 30s',
        })

        assert 'role="alert"' in html
        assert html.count('class="quake-error"') == 2
        assert 'Tectonic Plates could not be loaded: Request timed out after 30s' in html

    def test_escapes_messages(self):
        html = generate_error_banner({'Earthquakes': '<oops>'})
        assert '&lt;oops&gt;' in html


class TestGenerateTitleBlock:
    """Tests for generate_title_block()."""

    def test_title_feed_and_summary(self):
        html = generate_title_block('Earthquake Map', 'all_week', ['42 earthquakes'])

        assert 'Earthquake Map' in html
        assert 'USGS feed: all_week' in html
        assert '<div>42 earthquakes</div>' in html

    def test_without_feed(self):
        assert 'USGS feed' not in generate_title_block('Earthquake Map', None, [])
