from patternkit.geometric import GraphicObject, new_circle, new_square


def test_factories():
    assert new_circle("Red") == GraphicObject("Circle", "Red")
    assert new_square("Blue") == GraphicObject("Square", "Blue")


def test_single_object_without_color():
    assert str(GraphicObject("My Drawing")) == "My Drawing\n"


def test_nested_drawing():
    drawing = GraphicObject("My Drawing")
    drawing.children.append(new_circle("Red"))
    drawing.children.append(new_square("Yellow"))
    group = GraphicObject("Group 1")
    group.children.append(new_circle("Blue"))
    group.children.append(new_square("Blue"))
    drawing.children.append(group)

    assert str(drawing) == (
        "My Drawing\n"
        "*Red Circle\n"
        "*Yellow Square\n"
        "*Group 1\n"
        "**Blue Circle\n"
        "**Blue Square\n"
    )


def test_depth_marks_grow():
    root = GraphicObject("a")
    node = root
    for name in "bcd":
        child = GraphicObject(name)
        node.children.append(child)
        node = child
    lines = str(root).splitlines()
    assert [len(line) - len(line.lstrip("*")) for line in lines] == list(range(4))