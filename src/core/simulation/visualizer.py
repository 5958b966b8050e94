import time
from typing import Any, Callable, List, Optional

from src.core.config import VisualizerConfig
from src.core.models.snapshot import NodeSnapshot
from src.core.structures.activity_log import ActivityLog
from src.core.structures.avl_tree import AVLTree
from src.core.simulation.event_queue import EventRecorder, EventType, FIFOEventQueue, TreeEvent

# Texto exibido na barra de operação para cada tipo de evento do motor
OPERATION_LABELS = {
    EventType.ROTATE_LEFT: "Operation: Left Rotation",
    EventType.ROTATE_RIGHT: "Operation: Right Rotation",
}

class TreeVisualizer:
    """
    Sessão do visualizador AVL.
    Liga as ações da interface (inserir, remover, buscar, resetar) ao motor,
    mantendo o texto de operação, o nó destacado e o log de atividades.

    As operações rodam de forma síncrona até o fim; os eventos gravados ficam
    numa fila para que a interface os reproduza no seu próprio ritmo (replay).
    """
    def __init__(self, config: Optional[VisualizerConfig] = None):
        self.config = config or VisualizerConfig()
        self.recorder = EventRecorder()
        self.tree = AVLTree(observer=self.recorder)
        self.activity = ActivityLog(capacity=self.config.log_max_lines)
        self.pending = FIFOEventQueue()
        self.operation = "Operation: None"
        self.highlighted: Optional[Any] = None
        self.logs: List[str] = []

    # --- Entrada ---

    @staticmethod
    def parse_value(text) -> Optional[int]:
        """Converte o texto do campo em inteiro. Retorna None se não for um número."""
        if text is None:
            return None
        if isinstance(text, int) and not isinstance(text, bool):
            return text
        try:
            return int(str(text).strip(), 10)
        except ValueError:
            return None

    # --- Ações da interface ---

    def insert_value(self, text) -> bool:
        value = self.parse_value(text)
        if value is None:
            return False
        self.highlighted = None
        self.tree.insert(value)
        self._flush_engine_events()
        self._record(EventType.INSERT, f"Insert {value}", f"Operation: Insert {value}", value)
        return True

    def delete_value(self, text) -> bool:
        value = self.parse_value(text)
        if value is None:
            return False
        self.highlighted = None
        self.tree.delete(value)
        self._flush_engine_events()
        self._record(EventType.DELETE, f"Delete {value}", f"Operation: Delete {value}", value)
        return True

    def search_value(self, text) -> Optional[bool]:
        """
        Busca a chave. Retorna True/False (encontrada ou não) ou None se a entrada for inválida.
        O último nó visitado fica destacado quando a chave é encontrada.
        """
        value = self.parse_value(text)
        if value is None:
            return None
        self._record(EventType.SEARCH, f"Search {value}", f"Operation: Search {value}", value)

        visited: List[Any] = []
        found = self.tree.search(value, on_visit=lambda snap: visited.append(snap.value))
        self._flush_engine_events()

        self.highlighted = visited[-1] if found else None
        self.operation = f"Operation: Found {value}" if found else f"Operation: {value} not found"
        return found

    def reset(self):
        self.tree.clear()
        self.highlighted = None
        self.pending.clear()
        self._record(EventType.RESET, "Reset", "Operation: None")

    def snapshot(self) -> Optional[NodeSnapshot]:
        return self.tree.snapshot()

    # --- Reprodução paced ---

    def replay(self, on_step: Optional[Callable[[TreeEvent], Any]] = None,
               sleep: Callable[[float], Any] = time.sleep) -> List[TreeEvent]:
        """
        Esvazia a fila de eventos pendentes, chamando `on_step` para cada um.
        Entre nós visitados na busca há uma pausa de `search_step_delay_ms`;
        a pausa é só apresentação e não altera a árvore.
        """
        replayed: List[TreeEvent] = []
        while not self.pending.is_empty():
            event = self.pending.dequeue()
            if on_step is not None:
                on_step(event)
            replayed.append(event)
            if event.event_type == EventType.VISIT and self.config.search_step_delay_ms > 0:
                sleep(self.config.search_step_delay)
        return replayed

    # --- Log ---

    def log(self, msg: str):
        if self.config.verbose:
            print(msg)
        self.logs.append(msg)
        self.activity.push(msg)
        # Mantém apenas as últimas 50 mensagens em memória
        if len(self.logs) > 50:
            self.logs.pop(0)

    def _record(self, event_type: str, label: str, operation: str, value=None):
        self.operation = operation
        event = self.recorder(event_type, label, operation, value)
        self.recorder.drain()
        self.pending.enqueue(event)
        self.log(label)

    def _flush_engine_events(self):
        """Move os eventos emitidos pelo motor para o log e para a fila de replay."""
        for event in self.recorder.drain():
            if event.event_type in OPERATION_LABELS:
                self.operation = OPERATION_LABELS[event.event_type]
            if event.event_type != EventType.REBALANCE:
                self.log(event.label)
            self.pending.enqueue(event)
