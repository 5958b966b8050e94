from typing import Any, Dict, List, Optional, Tuple

from src.core.models.snapshot import NodeSnapshot

Position = Tuple[float, float]

class TreeLayout:
    """
    Calcula a posição (x, y) de cada nó para desenho.
    Regra simples: a raiz fica no centro do canvas e o espaçamento
    horizontal cai pela metade a cada nível.
    """

    @staticmethod
    def compute(snapshot: Optional[NodeSnapshot], width: float, top: float = 50.0,
                level_gap: float = 80.0) -> Dict[Any, Position]:
        positions: Dict[Any, Position] = {}
        if snapshot is None:
            return positions
        TreeLayout._place(snapshot, width / 2, top, width / 4, level_gap, positions)
        return positions

    @staticmethod
    def _place(node: Optional[NodeSnapshot], x: float, y: float, gap: float,
               level_gap: float, positions: Dict[Any, Position]):
        if node is None:
            return
        positions[node.value] = (x, y)
        TreeLayout._place(node.left, x - gap, y + level_gap, gap / 2, level_gap, positions)
        TreeLayout._place(node.right, x + gap, y + level_gap, gap / 2, level_gap, positions)

    @staticmethod
    def edges(snapshot: Optional[NodeSnapshot]) -> List[Tuple[Any, Any]]:
        """Lista de arestas (pai, filho) da árvore."""
        result: List[Tuple[Any, Any]] = []
        stack = [snapshot] if snapshot else []
        while stack:
            node = stack.pop()
            for child in (node.right, node.left):
                if child:
                    result.append((node.value, child.value))
                    stack.append(child)
        return result

def compute_layout(snapshot: Optional[NodeSnapshot], width: float, top: float = 50.0,
                   level_gap: float = 80.0) -> Dict[Any, Position]:
    return TreeLayout.compute(snapshot, width, top, level_gap)
