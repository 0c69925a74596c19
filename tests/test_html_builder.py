from patternkit.html_builder import INDENT_SIZE, HtmlBuilder, HtmlElement, demo


def test_single_child_rendering():
    builder = HtmlBuilder("ul").add_child("li", "hello")
    assert str(builder) == "<ul>\n  <li>\n    hello\n  </li>\n</ul>\n"


def test_empty_root():
    assert str(HtmlBuilder("ul")) == "<ul>\n</ul>\n"


def test_add_child_is_fluent_and_ordered():
    builder = HtmlBuilder("ul")
    assert builder.add_child("li", "item 1").add_child("li", "item 2") is builder
    assert [e.text for e in builder.root.elements] == ["item 1", "item 2"]
    text = str(builder)
    assert text.index("item 1") < text.index("item 2")


def test_nested_indentation():
    inner = HtmlElement("b", "x")
    outer = HtmlElement("p", "", [inner])
    lines = str(HtmlElement("div", "", [outer])).splitlines()
    assert lines[0] == "<div>"
    assert lines[1] == " " * INDENT_SIZE + "<p>"
    assert lines[2] == " " * (2 * INDENT_SIZE) + "<b>"
    assert lines[3] == " " * (3 * INDENT_SIZE) + "x"
    assert lines[-1] == "</div>"


def test_root_name_kept():
    builder = HtmlBuilder("ol")
    assert builder.root_name == "ol"
    assert builder.root.name == "ol"


def test_demo_output(capsys):
    demo()
    out = capsys.readouterr().out
    assert "<p>hello</p>" in out
    assert "<ul><li>hello</li><li>world</li></ul>" in out
    assert "item 2" in out