from ui import CanvasConfig, SvgRenderer, render_bars
from ui.controls import analytics_panel, playback_controls, pseudocode_viewer
from engine import RunMetrics


class TestRenderBars:
    def test_one_bar_per_value(self):
        svg = render_bars([10, 20, 30])
        assert svg.count('class="bar') == 3
        assert svg.startswith("<svg") and svg.endswith("</svg>")

    def test_highlight(self):
        svg = render_bars([10, 20, 30], highlight=1)
        assert svg.count('class="bar highlight"') == 1
        assert 'data-index="1"' in svg
        assert CanvasConfig.bar_colors["highlight"] in svg

    def test_no_highlight(self):
        assert 'class="bar highlight"' not in render_bars([1, 2])

    def test_empty(self):
        assert "Empty array" in render_bars([])

    def test_idempotent(self):
        assert render_bars([3, 1, 2], 0) == render_bars([3, 1, 2], 0)

    def test_labels_only_on_wide_bars(self):
        assert "<text" in render_bars([1, 2, 3])
        assert "<text" not in render_bars(list(range(400)))


class TestSvgRenderer:
    def test_keeps_last_frame(self):
        r = SvgRenderer(200, 100)
        r.render([5, 6], highlight=0)
        assert r.highlight == 0
        assert 'width="200"' in r.svg

    def test_resize_rerenders(self):
        r = SvgRenderer(200, 100)
        r.render([5, 6])
        r.resize(640, 300)
        assert 'width="640"' in r.svg and 'height="300"' in r.svg
        assert r.svg.count('class="bar') == 2

    def test_instances_do_not_share_config(self):
        a, b = SvgRenderer(100, 100), SvgRenderer(300, 300)
        a.resize(50, 50)
        assert b.config.width == 300
        assert CanvasConfig.width == 800


class TestPanels:
    def test_playback_disables_manual_buttons_while_running(self):
        html = playback_controls(state="running", cursor=3, total=9)
        assert html.count("disabled") == 4
        assert "Pause" in html

    def test_playback_paused(self):
        html = playback_controls(state="paused")
        assert "Resume" in html
        assert "disabled" not in html

    def test_analytics(self):
        assert "Run a sort" in analytics_panel(None)
        html = analytics_panel(RunMetrics(algo_label="Quick Sort", total_actions=12, swaps=12))
        assert "Quick Sort" in html and "12" in html

    def test_pseudocode_escapes(self):
        html = pseudocode_viewer(["if a < b:"])
        assert "a &lt; b" in html
