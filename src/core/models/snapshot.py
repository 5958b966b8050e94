from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

@dataclass(frozen=True)
class NodeSnapshot:
    """
    Cópia imutável de um nó (e de toda a sua subárvore).
    É o que a camada de renderização consome: nunca expõe os nós internos da AVL.
    """
    value: Any
    height: int
    left: Optional['NodeSnapshot'] = None
    right: Optional['NodeSnapshot'] = None

    @classmethod
    def from_node(cls, node) -> Optional['NodeSnapshot']:
        """Copia recursivamente um AVLNode (ou None)."""
        if node is None:
            return None
        return cls(
            value=node.value,
            height=node.height,
            left=cls.from_node(node.left),
            right=cls.from_node(node.right),
        )

    @classmethod
    def of_node(cls, node) -> Optional['NodeSnapshot']:
        """Copia só o nó (valor e altura), sem descer pelos filhos. O(1)."""
        if node is None:
            return None
        return cls(value=node.value, height=node.height)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'value': self.value,
            'height': self.height,
            'left': self.left.to_dict() if self.left else None,
            'right': self.right.to_dict() if self.right else None,
        }

    def shape(self) -> Tuple:
        """Forma estrutural como tuplas aninhadas: (valor, forma_esq, forma_dir)."""
        return (
            self.value,
            self.left.shape() if self.left else None,
            self.right.shape() if self.right else None,
        )

    def in_order(self) -> List[Any]:
        values: List[Any] = []
        if self.left:
            values.extend(self.left.in_order())
        values.append(self.value)
        if self.right:
            values.extend(self.right.in_order())
        return values

    def size(self) -> int:
        return 1 + (self.left.size() if self.left else 0) + (self.right.size() if self.right else 0)

    @property
    def balance(self) -> int:
        left_h = self.left.height if self.left else 0
        right_h = self.right.height if self.right else 0
        return left_h - right_h

    def find(self, value) -> Optional['NodeSnapshot']:
        """Busca sem efeitos colaterais dentro da cópia."""
        current = self
        while current:
            if value == current.value:
                return current
            current = current.left if value < current.value else current.right
        return None

    def violations(self) -> List[str]:
        """
        Lista todas as violações de invariantes da subárvore:
        ordem BST, |fator| <= 1 e altura em cache consistente.
        Lista vazia = árvore válida.
        """
        problems: List[str] = []
        self._check(None, None, problems)
        return problems

    def _check(self, low, high, problems: List[str]) -> int:
        if low is not None and not self.value > low:
            problems.append(f"Ordem BST violada: {self.value} deveria ser > {low}")
        if high is not None and not self.value < high:
            problems.append(f"Ordem BST violada: {self.value} deveria ser < {high}")

        left_h = self.left._check(low, self.value, problems) if self.left else 0
        right_h = self.right._check(self.value, high, problems) if self.right else 0

        real_height = 1 + max(left_h, right_h)
        if self.height != real_height:
            problems.append(f"Altura inconsistente em {self.value}: cache={self.height}, real={real_height}")
        if abs(left_h - right_h) > 1:
            problems.append(f"Desbalanceado em {self.value}: fator {left_h - right_h}")
        return real_height

def validate(snapshot: Optional[NodeSnapshot]) -> List[str]:
    """Atalho que aceita árvore vazia (sempre válida)."""
    if snapshot is None:
        return []
    return snapshot.violations()
