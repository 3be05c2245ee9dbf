import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Ensure the packages can be imported without installing
sys.path.append(os.getcwd())

GUARD_PAIRS = """
<pairs>
    <greeting>Hello</greeting>
    <ask_pass>Do you have a pass?</ask_pass>
    <pass_granted>Go ahead.</pass_granted>
    <pass_denied>Then turn back.</pass_denied>
</pairs>
"""

GUARD_TREE = """
<dialog>
    <A type="showdialog" who="Guard" next="B">greeting</A>
    <B type="choicedialog" who="Guard"
       choice_0="Yes" choiceNode_0="C"
       choice_1="No" choiceNode_1="D">ask_pass</B>
    <C type="showdialog" who="Guard">pass_granted</C>
    <D type="showdialog" who="Guard" next="">pass_denied</D>
</dialog>
"""


@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for pygame to allow headless testing.
    Autoused for all tests to prevent accidental window creation.
    """
    with patch('pygame.init'), \
         patch('pygame.display'), \
         patch('pygame.joystick'):
        yield


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from dialog_engine.core.events import EventBus
    return EventBus()


@pytest.fixture
def guard_tree():
    """Tree document: A (line) -> B (choice: Yes -> C, No -> D)."""
    return GUARD_TREE


@pytest.fixture
def localization():
    from dialog_framework.dialog.localization import LocalizationTable
    table = LocalizationTable()
    table.load(GUARD_PAIRS, source="en")
    return table


@pytest.fixture
def registry(localization):
    """Registry holding the guard conversation under "guard"."""
    from dialog_framework.dialog.builder import GraphBuilder
    from dialog_framework.dialog.registry import ConversationRegistry

    registry = ConversationRegistry(localization)
    registry.register(GraphBuilder(localization).build(GUARD_TREE, tree_id="guard"))
    return registry


@pytest.fixture
def display():
    """Headless display with four choice slots."""
    from dialog_framework.components.dialog import DialogDisplay
    return DialogDisplay.with_slots(4)


@pytest.fixture
def input_lock():
    from dialog_framework.components.host import InputLock
    return InputLock()


@pytest.fixture
def manager(registry, display, input_lock, event_bus):
    from dialog_framework.dialog.system import DialogManager
    return DialogManager(registry, display, input_lock, event_bus)


@pytest.fixture
def mock_view():
    """Presentation double that records every call."""
    view = MagicMock()
    view.slots = [MagicMock() for _ in range(4)]
    return view


@pytest.fixture
def resource_root(tmp_path):
    """Resources folder with the guard documents on disk."""
    pairs = tmp_path / "Dialogs" / "Pairs"
    trees = tmp_path / "Dialogs" / "Trees"
    pairs.mkdir(parents=True)
    trees.mkdir(parents=True)

    (pairs / "en.xml").write_text(GUARD_PAIRS, encoding="utf-8")
    (trees / "guard.xml").write_text(GUARD_TREE, encoding="utf-8")
    return tmp_path
