import pytest

from rendering.output import OutputRenderer, url_with_params


class TestUrlWithParams:
    def test_adds_param(self):
        assert url_with_params("/question/export.php", {"cpage": 2}) == "/question/export.php?cpage=2"

    def test_merges_and_escapes(self):
        url = url_with_params("/question/export.php?courseid=4&cpage=1", {"cpage": 3})

        assert url == "/question/export.php?courseid=4&amp;cpage=3"

    def test_unescaped(self):
        url = url_with_params("https://lms.example.org/q.php?a=1", {"b": "x y"}, escaped=False)

        assert url == "https://lms.example.org/q.php?a=1&b=x+y"


class TestOutputRenderer:
    def test_box(self):
        output = OutputRenderer()

        html = output.box_start("generalbox contextlevel50") + "x" + output.box_end()

        assert html == '<div class="box py-3 generalbox contextlevel50">x</div>'

    def test_box_with_id(self):
        output = OutputRenderer()

        assert output.box_start("generalbox", id="cats") == (
            '<div id="cats" class="box py-3 generalbox">'
        )

    def test_box_end_without_start_raises(self):
        with pytest.raises(RuntimeError):
            OutputRenderer().box_end()

    def test_heading(self):
        assert OutputRenderer().heading("Title", 3) == '<h3 class="main">Title</h3>'

    def test_heading_level_out_of_range(self):
        with pytest.raises(ValueError):
            OutputRenderer().heading("Title", 7)
