from typing import Any, Callable, List, Optional, Tuple

from src.core.models.snapshot import NodeSnapshot
from src.core.simulation.event_queue import EventType

class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena a chave (valor ordenável) e a altura da subárvore.
    """
    def __init__(self, value):
        self.value = value
        self.left: Optional['AVLNode'] = None
        self.right: Optional['AVLNode'] = None
        self.height = 1         # Folha tem altura 1, subárvore vazia tem altura 0

    def __repr__(self):
        return f"AVLNode({self.value}, h={self.height})"

class AVLTree:
    """
    Motor da Árvore AVL do visualizador.
    Garante inserção, remoção e busca em O(log n).

    O `observer` (opcional) recebe os eventos de narração (rotações,
    rebalanceamentos, nós visitados). É um canal lateral: nunca altera
    o resultado das operações.
    """
    def __init__(self, observer: Optional[Callable[..., Any]] = None):
        self.root: Optional[AVLNode] = None
        self.observer = observer
        self._size = 0

    # --- API pública ---

    def insert(self, value):
        """Insere a chave e rebalanceia a árvore. Chave duplicada é ignorada."""
        self.root = self._insert_recursive(self.root, value)

    def delete(self, value):
        """Remove a chave (se existir) e rebalanceia até a raiz."""
        self.root = self._delete_recursive(self.root, value)

    def search(self, value, on_visit: Optional[Callable[[NodeSnapshot], Any]] = None) -> bool:
        """
        Busca a chave descendo pela raiz em O(log n).
        `on_visit` é chamado uma vez por nó visitado, antes do teste de igualdade,
        com uma cópia imutável só daquele nó (valor e altura, sem a subárvore).
        """
        visit = None
        if on_visit is not None:
            visit = lambda node: on_visit(NodeSnapshot.of_node(node))
        found = self._search_node(value, visit, narrate=True)
        if found is not None:
            self._emit(EventType.FOUND, f"Found {value}", f"Chave {value} encontrada", value)
            return True
        self._emit(EventType.NOT_FOUND, f"{value} not found", f"Chave {value} não está na árvore", value)
        return False

    def search_path(self, value) -> Tuple[bool, List[Any]]:
        """Retorna (encontrado, chaves visitadas na ordem da descida)."""
        path: List[Any] = []
        found = self._search_node(value, lambda node: path.append(node.value))
        return found is not None, path

    def snapshot(self) -> Optional[NodeSnapshot]:
        """Cópia imutável da estrutura atual (valor, altura, filhos) para renderização."""
        return NodeSnapshot.from_node(self.root)

    def height(self) -> int:
        return self._get_height(self.root)

    def balance(self) -> int:
        return self._get_balance(self.root)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def clear(self):
        self.root = None
        self._size = 0

    def min(self):
        if self.root is None:
            raise ValueError("min() em árvore vazia")
        return self._min_value_node(self.root).value

    def max(self):
        if self.root is None:
            raise ValueError("max() em árvore vazia")
        node = self.root
        while node.right:
            node = node.right
        return node.value

    def in_order(self) -> List[Any]:
        """Retorna todas as chaves em ordem crescente (in-order traversal)."""
        values: List[Any] = []
        self._in_order(self.root, values)
        return values

    def is_valid(self) -> bool:
        """Verifica ordem BST, fator de balanceamento e cache de altura em toda a árvore."""
        snap = self.snapshot()
        return snap is None or not snap.violations()

    def __len__(self):
        return self._size

    def __contains__(self, value):
        return self._search_node(value, None) is not None

    def __repr__(self):
        return f"AVLTree(size={self._size}, height={self.height()})"

    # --- Inserção e remoção recursivas ---

    def _insert_recursive(self, node: Optional[AVLNode], value) -> AVLNode:
        # 1. Inserção normal de BST
        if not node:
            self._size += 1
            return AVLNode(value)

        if value < node.value:
            node.left = self._insert_recursive(node.left, value)
        elif value > node.value:
            node.right = self._insert_recursive(node.right, value)
        else:
            # Chaves duplicadas não são permitidas: nada muda
            return node

        # 2. Atualizar altura do nó ancestral
        self._update_height(node)

        # 3. Fator de balanceamento
        balance = self._get_balance(node)

        # 4. Rotações (o desempate usa a chave inserida)

        # Caso 1 - Rotação à Direita (Left-Left Case)
        if balance > 1 and value < node.left.value:
            self._emit_rebalance("Left-Left", node)
            return self._rotate_right(node)

        # Caso 2 - Rotação à Esquerda (Right-Right Case)
        if balance < -1 and value > node.right.value:
            self._emit_rebalance("Right-Right", node)
            return self._rotate_left(node)

        # Caso 3 - Rotação Dupla à Direita (Left-Right Case)
        if balance > 1 and value > node.left.value:
            self._emit_rebalance("Left-Right", node)
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        # Caso 4 - Rotação Dupla à Esquerda (Right-Left Case)
        if balance < -1 and value < node.right.value:
            self._emit_rebalance("Right-Left", node)
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    def _delete_recursive(self, node: Optional[AVLNode], value) -> Optional[AVLNode]:
        # 1. Remoção normal de BST
        if not node:
            return node

        if value < node.value:
            node.left = self._delete_recursive(node.left, value)
        elif value > node.value:
            node.right = self._delete_recursive(node.right, value)
        elif not node.left or not node.right:
            # Zero ou um filho: o filho (ou nada) ocupa o lugar do nó
            self._size -= 1
            node = node.left or node.right
        else:
            # Dois filhos: copia o sucessor in-order e remove-o da subárvore direita
            successor = self._min_value_node(node.right)
            node.value = successor.value
            node.right = self._delete_recursive(node.right, successor.value)

        # 2. Subárvore esvaziada: propaga o vazio para cima
        if not node:
            return node

        # 3. Atualizar altura e obter o fator de balanceamento
        self._update_height(node)
        balance = self._get_balance(node)

        # 4. Rotações (sem chave inserida: o desempate usa o fator do filho)

        # Caso 1 - Rotação à Direita (Left-Left Case)
        if balance > 1 and self._get_balance(node.left) >= 0:
            self._emit_rebalance("Left-Left", node)
            return self._rotate_right(node)

        # Caso 3 - Rotação Dupla à Direita (Left-Right Case)
        if balance > 1 and self._get_balance(node.left) < 0:
            self._emit_rebalance("Left-Right", node)
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        # Caso 2 - Rotação à Esquerda (Right-Right Case)
        if balance < -1 and self._get_balance(node.right) <= 0:
            self._emit_rebalance("Right-Right", node)
            return self._rotate_left(node)

        # Caso 4 - Rotação Dupla à Esquerda (Right-Left Case)
        if balance < -1 and self._get_balance(node.right) > 0:
            self._emit_rebalance("Right-Left", node)
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    def _search_node(self, value, on_visit, narrate: bool = False) -> Optional[AVLNode]:
        # Só a busca pública narra; `in` e search_path são consultas silenciosas
        current = self.root
        while current:
            if on_visit is not None:
                on_visit(current)
            if narrate:
                self._emit(EventType.VISIT, f"Check {current.value}",
                           f"Comparando {value} com {current.value}", current.value)
            if value == current.value:
                return current
            current = current.left if value < current.value else current.right
        return None

    # --- Métodos Auxiliares e Rotações ---

    def _get_height(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return node.height

    def _get_balance(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _update_height(self, node: AVLNode):
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _min_value_node(self, node: AVLNode) -> AVLNode:
        current = node
        while current.left:
            current = current.left
        return current

    def _rotate_left(self, x: AVLNode) -> AVLNode:
        """
        Rotação simples à esquerda: o filho direito sobe.
        Usada quando o peso está na direita (Right-Right).
        """
        self._emit(EventType.ROTATE_LEFT, "Left rotation",
                   f"Rotação à esquerda em {x.value}: {x.right.value} sobe", x.value)
        y = x.right
        T2 = y.left

        # Rotação
        y.left = x
        x.right = T2

        # Atualiza alturas (primeiro o nó que desceu)
        self._update_height(x)
        self._update_height(y)

        return y

    def _rotate_right(self, y: AVLNode) -> AVLNode:
        """
        Rotação simples à direita: o filho esquerdo sobe.
        Usada quando o peso está na esquerda (Left-Left).
        """
        self._emit(EventType.ROTATE_RIGHT, "Right rotation",
                   f"Rotação à direita em {y.value}: {y.left.value} sobe", y.value)
        x = y.left
        T2 = x.right

        x.right = y
        y.left = T2

        self._update_height(y)
        self._update_height(x)

        return x

    def _in_order(self, node: Optional[AVLNode], values: List[Any]):
        if node:
            self._in_order(node.left, values)
            values.append(node.value)
            self._in_order(node.right, values)

    # --- Narração ---

    def _emit(self, event_type: str, label: str, description: str, value=None):
        if self.observer is not None:
            self.observer(event_type, label, description, value)

    def _emit_rebalance(self, case: str, node: AVLNode):
        self._emit(EventType.REBALANCE, case,
                   f"Nó {node.value} desbalanceado (fator {self._get_balance(node)}): caso {case}",
                   node.value)
