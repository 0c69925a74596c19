from patternkit.dip import Info, Person, Relationship, Relationships, Research


def _family():
    john, mark, chris = Person("John"), Person("Mark"), Person("Chris")
    rels = Relationships()
    rels.add_parent_and_child(john, mark)
    rels.add_parent_and_child(mark, chris)
    return rels, john, mark, chris


def test_add_parent_and_child_records_both_directions():
    rels = Relationships()
    parent, child = Person("John"), Person("Mark")
    rels.add_parent_and_child(parent, child)
    assert rels.relations == [
        Info(parent, Relationship.PARENT, child),
        Info(child, Relationship.CHILD, parent),
    ]


def test_find_all_children_of():
    rels, john, mark, chris = _family()
    children = rels.find_all_children_of("John")
    assert len(children) == 1
    assert children[0] is mark
    assert rels.find_all_children_of("Mark")[0] is chris


def test_find_children_of_unknown_or_childless():
    rels, *_ = _family()
    assert rels.find_all_children_of("Chris") == []
    assert rels.find_all_children_of("Nobody") == []


def test_investigate_reports_johns_children(capsys):
    rels, *_ = _family()
    lines = Research(rels).investigate()
    assert lines == ["John has a child called Mark"]
    assert capsys.readouterr().out == "John has a child called Mark\n"


class _FixedBrowser:
    def __init__(self, children):
        self.children = children
        self.asked = []

    def find_all_children_of(self, name):
        self.asked.append(name)
        return self.children


def test_investigate_uses_any_browser():
    browser = _FixedBrowser([Person("Ann"), Person("Bob")])
    lines = Research(browser).investigate()
    assert browser.asked == ["John"]
    assert lines == ["John has a child called Ann", "John has a child called Bob"]