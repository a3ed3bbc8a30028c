"""
Тесты семантического графа: точки подключения, блоки, сборка материала.
"""

import numpy as np
import pytest

from materialgraph import log

from materialgraph.material import (
    BuildError,
    ConnectionPointError,
    FragmentOutputBlock,
    MultiplyBlock,
    NodeMaterial,
    TextureBlock,
    TransformBlock,
    UnknownBlockError,
    VertexOutputBlock,
    create_block,
    get_block_names,
)


# ============== ConnectionPoint ==============

def test_connect_sets_both_sides():
    texture = TextureBlock()
    multiply = MultiplyBlock()

    texture.get_output("rgba").connect_to(multiply.get_input("left"))

    assert multiply.get_input("left").connected_point is texture.get_output("rgba")
    assert texture.get_output("rgba").endpoints == [multiply.get_input("left")]
    assert multiply.input_dependencies() == [multiply.get_input("left")]


def test_connect_type_mismatch_raises():
    texture = TextureBlock()
    vertex = VertexOutputBlock()

    with pytest.raises(ConnectionPointError):
        texture.get_output("rgb").connect_to(vertex.get_input("vector"))

    assert vertex.get_input("vector").connected_point is None
    assert texture.get_output("rgb").endpoints == []


def test_connect_requires_output_to_input():
    a = MultiplyBlock()
    b = MultiplyBlock()
    with pytest.raises(ConnectionPointError):
        a.get_input("left").connect_to(b.get_output("output"))


def test_connect_to_same_block_is_rejected():
    multiply = MultiplyBlock()
    assert not multiply.get_output("output").can_connect_to(multiply.get_input("left"))


def test_connect_replaces_previous_source():
    """Вход имеет не более одного источника."""
    first = MultiplyBlock("first")
    second = MultiplyBlock("second")
    fragment = FragmentOutputBlock()
    color = fragment.get_input("color")

    first.get_output("output").connect_to(color)
    second.get_output("output").connect_to(color)

    assert color.connected_point is second.get_output("output")
    assert first.get_output("output").endpoints == []


def test_disconnect_unconnected_raises():
    multiply = MultiplyBlock()
    fragment = FragmentOutputBlock()
    with pytest.raises(ConnectionPointError):
        multiply.get_output("output").disconnect_from(fragment.get_input("color"))


# ============== Blocks ==============

def test_create_block_by_class_name():
    block = create_block("TextureBlock", "albedo")
    assert isinstance(block, TextureBlock)
    assert block.name == "albedo"
    assert block.get_class_name() == "TextureBlock"
    assert "FragmentOutputBlock" in get_block_names()


def test_create_unknown_block_raises():
    with pytest.raises(UnknownBlockError) as info:
        create_block("NoiseBlock")
    assert "NoiseBlock" in str(info.value)


def test_output_roots_are_final_mergers():
    material = NodeMaterial()
    with pytest.raises(BuildError):
        material.add_output_node(MultiplyBlock())

    vertex = VertexOutputBlock()
    fragment = FragmentOutputBlock()
    material.add_output_node(fragment)
    material.add_output_node(vertex)
    material.add_output_node(vertex)

    assert material.output_nodes == [vertex, fragment]
    assert material.vertex_output_nodes == [vertex]
    assert material.fragment_output_nodes == [fragment]

    material.remove_output_node(vertex)
    assert not material.has_output_node(vertex)


# ============== Build ==============

def test_build_without_outputs_fails():
    with pytest.raises(BuildError, match="no output nodes"):
        NodeMaterial().build()


def test_build_missing_required_input_fails():
    material = NodeMaterial()
    material.add_output_node(VertexOutputBlock("vertex"))

    with pytest.raises(BuildError, match="vertex.vector"):
        material.build()
    assert material.build_id == 0


def test_build_order_is_topological():
    material = NodeMaterial()
    vertex = VertexOutputBlock()
    transform = TransformBlock()
    transform.get_output("output").connect_to(vertex.get_input("vector"))
    transform.get_input("vector").value = np.zeros(4, dtype=np.float32)
    transform.get_input("transform").value = np.identity(4, dtype=np.float32)
    material.add_output_node(vertex)

    assert material.build() == [transform, vertex]
    assert material.build_id == 1


def test_build_detects_cycles():
    material = NodeMaterial()
    fragment = FragmentOutputBlock()
    a = MultiplyBlock("a")
    b = MultiplyBlock("b")
    a.get_output("output").connect_to(fragment.get_input("color"))
    a.get_output("output").connect_to(b.get_input("left"))
    b.get_output("output").connect_to(a.get_input("left"))
    material.add_output_node(fragment)

    with pytest.raises(BuildError, match="cycles"):
        material.build()


def test_verbose_build_reports_order_to_log():
    material = NodeMaterial("quad")
    vertex = VertexOutputBlock("vertex")
    transform = TransformBlock("transform")
    transform.get_output("output").connect_to(vertex.get_input("vector"))
    transform.get_input("vector").value = np.zeros(4, dtype=np.float32)
    transform.get_input("transform").value = np.identity(4, dtype=np.float32)
    material.add_output_node(vertex)

    messages = []
    log.set_level(log.Level.DEBUG)
    log.set_callback(lambda level, message: messages.append((level, message)))
    try:
        material.build(verbose=True)
    finally:
        log.set_callback(None)
        log.set_level(log.Level.WARN)

    assert messages == [(log.Level.DEBUG, "Built quad: transform -> vertex")]
