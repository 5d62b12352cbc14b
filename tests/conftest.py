"""
Shared fixtures for group transform tests.

Provides a wired engine plus reusable diagrams: a flat group and a
three-level nested tree.
"""
import sys
import os
import pytest

# Ensure src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from group_transform import TransformEngine, Group, Node


# ── Diagram builders ─────────────────────────────────────────────────────

def build_flat(graph):
    """Group 'g' at (100, 100), 200x100, with children 'a' and 'b'."""
    graph.add_node(Group('g', x=100, y=100, width=200, height=100))
    graph.add_node(Node('a', x=120, y=100, width=100, height=50))
    graph.add_node(Node('b', x=60, y=80, width=40, height=20))
    graph.add_child('g', 'a')
    graph.add_child('g', 'b')


def build_nested(graph):
    """outer ⊃ {leaf1, inner ⊃ {leaf2, deep ⊃ {leaf3}}, leaf4}"""
    graph.add_node(Group('outer', x=0, y=0, width=400, height=400))
    graph.add_node(Node('leaf1', x=-100, y=-100, width=40, height=40))
    graph.add_node(Group('inner', x=50, y=50, width=200, height=200))
    graph.add_node(Node('leaf2', x=20, y=30, width=20, height=20))
    graph.add_node(Group('deep', x=80, y=80, width=100, height=100))
    graph.add_node(Node('leaf3', x=90, y=70, width=10, height=10))
    graph.add_node(Node('leaf4', x=150, y=-150, width=40, height=40))
    graph.add_child('outer', 'leaf1')
    graph.add_child('outer', 'inner')
    graph.add_child('inner', 'leaf2')
    graph.add_child('inner', 'deep')
    graph.add_child('deep', 'leaf3')
    graph.add_child('outer', 'leaf4')


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def engine():
    """Fresh engine with an empty graph"""
    return TransformEngine()


@pytest.fixture
def graph(engine):
    return engine.graph


@pytest.fixture
def flat_engine(engine):
    """Engine tracking the flat diagram"""
    build_flat(engine.graph)
    engine.sync_groups()
    return engine


@pytest.fixture
def nested_engine(engine):
    """Engine tracking the nested diagram"""
    build_nested(engine.graph)
    engine.sync_groups()
    return engine
