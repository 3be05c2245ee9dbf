import logging
import pytest
from dialog_framework.dialog.builder import GraphBuilder
from dialog_framework.dialog.errors import (
    DuplicateNodeError,
    EmptyChoiceError,
    ParseError,
    TooManyOptionsError,
    UnresolvedReferenceError,
)
from dialog_framework.dialog.nodes import ChoiceNode, LineNode, NodeKind


@pytest.fixture
def builder(localization):
    return GraphBuilder(localization)


def test_build_guard_tree(builder, guard_tree):
    tree = builder.build(guard_tree, tree_id="guard")

    assert tree.tree_id == "guard"
    assert len(tree) == 4

    a = tree.root
    assert isinstance(a, LineNode)
    assert a.kind is NodeKind.LINE
    assert a.name == "A"
    assert a.speaker == "Guard"
    assert a.text == "Hello"

    b = a.successor
    assert isinstance(b, ChoiceNode)
    assert b.text == "Do you have a pass?"
    assert [o.label for o in b.options] == ["Yes", "No"]
    assert [o.target_name for o in b.options] == ["C", "D"]
    assert b.chosen_index == -1

    c, d = (o.target for o in b.options)
    assert c.is_terminal
    assert d.is_terminal
    assert d.text == "Then turn back."

def test_empty_document_has_no_root(builder):
    tree = builder.build("<dialog></dialog>", tree_id="empty")
    assert tree.root is None
    assert tree.is_empty

def test_unmapped_text_kept_raw(builder):
    tree = builder.build('<d><a type="showdialog">Just some words</a></d>')
    assert tree.root.text == "Just some words"

def test_missing_who_gives_empty_speaker(builder):
    tree = builder.build('<d><a type="showdialog">greeting</a></d>')
    assert tree.root.speaker == ""

def test_forward_reference_resolves(builder):
    doc = """
    <d>
        <first type="showdialog" next="third">one</first>
        <second type="showdialog">two</second>
        <third type="showdialog" next="second">three</third>
    </d>
    """
    tree = builder.build(doc)
    first = tree.root
    assert first.successor.name == "third"
    assert first.successor.successor.name == "second"

def test_type_is_case_insensitive(builder):
    doc = '<d><a type="  ShowDialog ">x</a><b type="CHOICEDIALOG" choice_0="ok" choiceNode_0="a">y</b></d>'
    tree = builder.build(doc)
    assert [n.kind for n in tree.nodes] == [NodeKind.LINE, NodeKind.CHOICE]

def test_unknown_type_is_skipped_with_warning(builder, caplog):
    doc = """
    <d>
        <intro type="cutscene">ignored</intro>
        <notype>also ignored</notype>
        <b type="showdialog">greeting</b>
    </d>
    """
    with caplog.at_level(logging.WARNING):
        tree = builder.build(doc, tree_id="odd")

    # First allocated node is the root, whatever came before it
    assert tree.root.name == "b"
    assert len(tree) == 1
    assert "cutscene" in caplog.text

def test_root_can_be_a_choice(builder):
    doc = '<d><q type="choicedialog" choice_0="Bye" choiceNode_0="end">ask</q><end type="showdialog">bye</end></d>'
    tree = builder.build(doc)
    assert isinstance(tree.root, ChoiceNode)

def test_id_attribute_names_the_node(builder):
    doc = """
    <d>
        <line id="start" type="showdialog" next="end">one</line>
        <line id="end" type="showdialog">two</line>
    </d>
    """
    tree = builder.build(doc)
    assert tree.root.name == "start"
    assert tree.root.successor.name == "end"

@pytest.mark.parametrize("n", [1, 2, 5])
def test_choice_option_count_follows_pairs(builder, n):
    pairs = " ".join(f'choice_{i}="opt{i}" choiceNode_{i}="t{i}"' for i in range(n))
    targets = "".join(f'<t{i} type="showdialog">target {i}</t{i}>' for i in range(n))
    tree = builder.build(f'<d><q type="choicedialog" {pairs}>ask</q>{targets}</d>')

    options = tree.root.options
    assert len(options) == n
    assert [o.label for o in options] == [f"opt{i}" for i in range(n)]
    assert [o.target.text for o in options] == [f"target {i}" for i in range(n)]

def test_choice_without_options_fails(builder):
    with pytest.raises(EmptyChoiceError) as exc:
        builder.build('<d><q type="choicedialog" who="Guard">ask</q></d>')
    assert exc.value.source == "q"

def test_unpaired_choice_attribute_is_ignored(builder, caplog):
    doc = '<d><q type="choicedialog" choice_0="Yes" choiceNode_0="a" choice_1="No">ask</q><a type="showdialog">x</a></d>'
    with caplog.at_level(logging.WARNING):
        tree = builder.build(doc)

    assert len(tree.root.options) == 1
    assert "choice_1" in caplog.text

def test_unresolved_next_fails(builder):
    with pytest.raises(UnresolvedReferenceError) as exc:
        builder.build('<d><a type="showdialog" next="nowhere">x</a></d>')

    assert exc.value.source == "a"
    assert exc.value.target == "nowhere"
    assert "nowhere" in str(exc.value)

def test_unresolved_choice_target_fails(builder):
    doc = '<d><q type="choicedialog" choice_0="Go" choiceNode_0="missing">ask</q></d>'
    with pytest.raises(UnresolvedReferenceError) as exc:
        builder.build(doc)
    assert exc.value.target == "missing"

def test_reference_to_skipped_element_fails(builder):
    doc = '<d><a type="showdialog" next="b">x</a><b type="cutscene">y</b></d>'
    with pytest.raises(UnresolvedReferenceError):
        builder.build(doc)

def test_duplicate_names_fail(builder):
    doc = '<d><a type="showdialog">x</a><a type="showdialog">y</a></d>'
    with pytest.raises(DuplicateNodeError):
        builder.build(doc)

def test_too_many_options_for_slots(localization):
    builder = GraphBuilder(localization, max_options=1)
    doc = '<d><q type="choicedialog" choice_0="a" choiceNode_0="q" choice_1="b" choiceNode_1="q">ask</q></d>'

    with pytest.raises(TooManyOptionsError) as exc:
        builder.build(doc)
    assert exc.value.count == 2
    assert exc.value.slots == 1

def test_malformed_document(builder):
    with pytest.raises(ParseError):
        builder.build("<d><a type='showdialog'>x</d>", tree_id="bad")

def test_builds_are_independent(builder, guard_tree):
    first = builder.build(guard_tree, tree_id="guard")
    second = builder.build(guard_tree, tree_id="guard")

    assert first.root is not second.root
    assert first.root.successor.options[0].target is not second.root.successor.options[0].target

def test_cycles_do_not_break_repr(builder):
    tree = builder.build('<d><a type="showdialog" next="b">x</a><b type="showdialog" next="a">y</b></d>')
    assert "LineNode" in repr(tree.root)
