"""
Тесты редактора: пересборка материала, журнал, клавиатура, регистрация выходов.
"""

import numpy as np
import pytest
from PyQt6.QtCore import QSettings

from materialgraph.material import (
    FragmentOutputBlock,
    MultiplyBlock,
    NodeMaterial,
    VertexOutputBlock,
)
from materialgraph.nodegraph import EditorState, GraphEditor, LogEntry
from materialgraph.nodegraph.rebuild import BUILD_SUCCESS_MESSAGE, MaterialRebuilder
from materialgraph.nodegraph.registrar import OutputRootRegistrar
from materialgraph.settings import EditorSettings


class KeyHost:
    """Заглушка документа, раздающего события клавиатуры."""

    def __init__(self):
        self.listeners = []

    def add_key_listener(self, callback):
        self.listeners.append(callback)

    def remove_key_listener(self, callback):
        self.listeners.remove(callback)

    def key_up(self, key):
        for callback in list(self.listeners):
            callback(key)


def _buildable_material():
    material = NodeMaterial("buildable")
    fragment = FragmentOutputBlock("fragment")
    multiply = MultiplyBlock("multiply")
    multiply.get_input("left").value = np.ones(4, dtype=np.float32)
    multiply.get_input("right").value = np.ones(4, dtype=np.float32)
    multiply.get_output("output").connect_to(fragment.get_input("color"))
    material.add_output_node(fragment)
    return material, fragment, multiply


# ============== Rebuild ==============

def test_rebuild_success_logs_info():
    material, fragment, multiply = _buildable_material()
    state = EditorState(material)
    entries = []
    state.on_log += entries.append

    assert MaterialRebuilder(state).rebuild() is True

    assert entries == [LogEntry(BUILD_SUCCESS_MESSAGE, is_error=False)]
    assert material.build_id == 1
    assert material.build_order == [multiply, fragment]


def test_rebuild_failure_logs_error():
    material = NodeMaterial()
    state = EditorState(material)
    entries = []
    state.on_log += entries.append

    assert MaterialRebuilder(state).rebuild() is False

    assert len(entries) == 1
    assert entries[0].is_error
    assert "no output nodes" in entries[0].message


def test_rebuild_never_raises(monkeypatch):
    """Любое исключение build() превращается в запись журнала."""
    material, *_ = _buildable_material()
    state = EditorState(material)
    entries = []
    state.on_log += entries.append
    calls = []

    def broken_build(verbose=False):
        calls.append(verbose)
        raise RuntimeError("driver lost")

    monkeypatch.setattr(material, "build", broken_build)

    assert MaterialRebuilder(state).rebuild() is False
    assert MaterialRebuilder(state).rebuild() is False

    assert len(calls) == 2
    assert [e.is_error for e in entries] == [True, True]
    assert "driver lost" in entries[0].message


def test_rebuild_without_material_is_noop():
    state = EditorState()
    entries = []
    state.on_log += entries.append

    assert MaterialRebuilder(state).rebuild() is False
    assert entries == []


def test_reset_and_rebuild_builds_material():
    material, fragment, multiply = _buildable_material()
    state = EditorState(material)
    entries = []
    state.on_log += entries.append
    editor = GraphEditor(state)

    editor.reset_and_rebuild()
    editor.notify_view_ready()

    assert entries[-1].message == BUILD_SUCCESS_MESSAGE
    # fragment, multiply and literal nodes for multiply.left/right
    assert len(editor.model.get_nodes()) == 4
    assert len(editor.model.get_links()) == 3


def test_state_events_drive_editor():
    material, fragment, multiply = _buildable_material()
    state = EditorState(material)
    editor = GraphEditor(state)
    editor.notify_view_ready()
    updates = []
    state.on_update_required += updates.append

    state.on_rebuild_required.emit()
    assert material.build_id == 1
    assert updates == [None]

    old_model = editor.model
    state.on_reset_required.emit()
    assert editor.model is not old_model
    assert material.build_id == 2

    editor.close()
    state.on_rebuild_required.emit()
    assert material.build_id == 2


def test_replaced_model_is_not_observed():
    """Старый визуальный граф после сброса не влияет на материал."""
    material, fragment, multiply = _buildable_material()
    editor = GraphEditor(EditorState(material))
    editor.notify_view_ready()
    old_model = editor.model
    old_fragment_node = old_model.find_node(fragment)

    editor.reset_and_rebuild()
    old_model.remove_node(old_fragment_node)

    assert fragment in material.output_nodes
    assert multiply.get_output("output").endpoints == [fragment.get_input("color")]


# ============== Registrar ==============

def test_registrar_is_idempotent():
    material = NodeMaterial()
    vertex = VertexOutputBlock()
    registrar = OutputRootRegistrar(lambda: material)

    registrar.register(vertex)
    registrar.register(vertex)
    assert material.output_nodes == [vertex]
    assert registrar.is_registered(vertex)

    registrar.unregister(vertex)
    registrar.unregister(vertex)
    assert material.output_nodes == []
    assert not registrar.is_registered(vertex)


def test_registrar_ignores_non_final_blocks_and_missing_material():
    material = NodeMaterial()
    registrar = OutputRootRegistrar(lambda: material)
    registrar.register(MultiplyBlock())
    assert material.output_nodes == []

    detached = OutputRootRegistrar(lambda: None)
    detached.register(VertexOutputBlock())
    detached.unregister(VertexOutputBlock())
    assert not detached.is_registered(VertexOutputBlock())


# ============== Keyboard ==============

def test_delete_key_removes_selected_nodes():
    material, fragment, multiply = _buildable_material()
    host = KeyHost()
    editor = GraphEditor(EditorState(material, host_document=host))
    editor.notify_view_ready()

    assert editor.attach() is True
    node = editor.model.find_node(multiply)
    node.selected = True
    host.key_up("Escape")
    assert node in editor.model.get_nodes()

    host.key_up("Delete")
    assert node not in editor.model.get_nodes()
    assert fragment.get_input("color").connected_point is None

    editor.detach()
    assert host.listeners == []


def test_delete_key_removes_selected_links():
    material, fragment, multiply = _buildable_material()
    host = KeyHost()
    editor = GraphEditor(EditorState(material))
    editor.notify_view_ready()
    editor.attach(host)

    fragment_node = editor.model.find_node(fragment)
    link = fragment_node.get_input("color").links[0]
    link.selected = True
    host.key_up(46)

    assert link not in editor.model.get_links()
    assert len(editor.model.get_links()) == 2
    assert len(editor.model.get_nodes()) == 4
    assert fragment.get_input("color").connected_point is None


def test_attach_without_host_is_skipped():
    editor = GraphEditor(EditorState(NodeMaterial()))
    assert editor.attach() is False
    assert editor.attach(object()) is False
    editor.detach()


# ============== Settings ==============

def test_editor_uses_layout_settings(tmp_path):
    qsettings = QSettings(str(tmp_path / "editor.ini"), QSettings.Format.IniFormat)
    settings = EditorSettings(qsettings)
    settings.set(EditorSettings.KEY_COLUMN_SPACING, 100)
    settings.set(EditorSettings.KEY_ROW_SPACING, 50)

    material, fragment, multiply = _buildable_material()
    editor = GraphEditor(EditorState(material), settings)
    editor.notify_view_ready()

    multiply_node = editor.model.find_node(multiply)
    assert (multiply_node.x, multiply_node.y) == (1500.0, 0.0)


@pytest.mark.parametrize(
    "width, expected",
    [(100, 150), (250, 250), (1000, 400)],
)
def test_left_width_is_clamped(tmp_path, width, expected):
    qsettings = QSettings(str(tmp_path / "editor.ini"), QSettings.Format.IniFormat)
    settings = EditorSettings(qsettings)

    assert settings.set_left_width(width) == expected
    assert settings.get_left_width() == expected


def test_panel_width_defaults(tmp_path):
    qsettings = QSettings(str(tmp_path / "editor.ini"), QSettings.Format.IniFormat)
    settings = EditorSettings(qsettings)

    assert settings.get_left_width() == 200
    assert settings.get_right_width() == 300
    assert settings.set_right_width(900) == 500
