import sys
import os
import dataclasses

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.avl_tree import AVLTree
from src.core.models.snapshot import NodeSnapshot, validate

def test_snapshot_is_detached_copy():
    print("--- Iniciando Teste do Snapshot ---")

    avl = AVLTree()
    for v in [20, 10, 30]:
        avl.insert(v)
    snap = avl.snapshot()

    # Mutações posteriores não podem alterar a cópia
    avl.insert(40)
    avl.delete(10)

    assert snap.shape() == (20, (10, None, None), (30, None, None))
    assert snap.to_dict() == {
        'value': 20, 'height': 2,
        'left': {'value': 10, 'height': 1, 'left': None, 'right': None},
        'right': {'value': 30, 'height': 1, 'left': None, 'right': None},
    }
    assert snap.size() == 3
    assert snap.in_order() == [10, 20, 30]
    assert snap.find(30).height == 1
    assert snap.find(99) is None

    try:
        snap.value = 5
    except dataclasses.FrozenInstanceError:
        print(">> SUCESSO: Snapshot é imutável.")
    else:
        raise AssertionError("NodeSnapshot deveria ser imutável")

def test_of_node_copies_single_node():
    avl = AVLTree()
    for v in [20, 10, 30]:
        avl.insert(v)

    single = NodeSnapshot.of_node(avl.root)
    assert single == NodeSnapshot(value=20, height=2)
    assert single.left is None and single.right is None
    assert single.size() == 1
    assert NodeSnapshot.of_node(None) is None

def test_violations_detects_broken_trees():
    # Ordem BST errada + altura em cache errada
    bad_order = NodeSnapshot(10, 1, left=NodeSnapshot(20, 1))
    problems = bad_order.violations()
    print(f"Problemas encontrados: {problems}")
    assert any("Ordem BST" in p for p in problems)
    assert any("Altura inconsistente" in p for p in problems)

    # Corrente para a direita: fator -2 na raiz
    chain = NodeSnapshot(10, 3, right=NodeSnapshot(20, 2, right=NodeSnapshot(30, 1)))
    assert chain.balance == -2
    assert chain.violations() == ["Desbalanceado em 10: fator -2"]

    healthy = NodeSnapshot(20, 2, left=NodeSnapshot(10, 1), right=NodeSnapshot(30, 1))
    assert healthy.violations() == []
    assert validate(None) == []
