from rendering import html_writer


class TestAttributes:
    def test_keeps_order_and_skips_none(self):
        assert html_writer.attributes({"id": "x", "checked": None, "name": "y"}) == ' id="x" name="y"'

    def test_escapes_values(self):
        assert html_writer.attributes({"title": 'a "b" & <c>'}) == (
            ' title="a &quot;b&quot; &amp; &lt;c&gt;"'
        )

    def test_empty(self):
        assert html_writer.attributes(None) == ""
        assert html_writer.attributes({}) == ""


class TestTags:
    def test_tag_does_not_escape_contents(self):
        assert html_writer.tag("b", "<i>x</i>") == "<b><i>x</i></b>"

    def test_tag_with_attributes(self):
        assert html_writer.tag("h3", "Title", {"class": "main"}) == '<h3 class="main">Title</h3>'

    def test_empty_tag(self):
        assert html_writer.empty_tag("br") == "<br />"


class TestCheckbox:
    def test_unchecked_with_id(self):
        html = html_writer.checkbox("cat5", 1, checked=False, attrs={"id": "checkcat5"})

        assert html == '<input id="checkcat5" type="checkbox" value="1" name="cat5" />'

    def test_checked(self):
        html = html_writer.checkbox("agree", "yes")

        assert html == '<input type="checkbox" value="yes" name="agree" checked="checked" />'

    def test_label_gets_generated_id(self):
        html = html_writer.checkbox("agree", 1, label="I agree")

        assert html.startswith('<input id="checkbox_')
        assert '<label for="checkbox_' in html
        assert html.endswith(">I agree</label>")

    def test_does_not_modify_given_attributes(self):
        attrs = {"id": "keep"}
        html_writer.checkbox("x", 1, attrs=attrs)

        assert attrs == {"id": "keep"}
