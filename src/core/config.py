from dataclasses import dataclass

@dataclass
class VisualizerConfig:
    """
    Parâmetros do visualizador (canvas, ritmo da animação, log e cores).
    Os valores padrão reproduzem a página web do visualizador AVL.
    """
    canvas_width: float = 900.0
    canvas_height: float = 520.0
    top_margin: float = 50.0        # y da raiz
    level_gap: float = 80.0         # Distância vertical entre níveis
    node_size: float = 46.0         # Lado do quadrado de cada nó

    search_step_delay_ms: int = 550  # Pausa entre nós visitados na busca
    log_max_lines: int = 10
    verbose: bool = False

    # Cores
    node_fill: str = "#dff7e6"
    node_border: str = "#e7e7f2"
    highlight_fill: str = "#fff2c6"
    highlight_border: str = "#f1d27a"
    edge_color: str = "#ff6b6b"
    text_color: str = "#1f2937"

    def __post_init__(self):
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("As dimensões do canvas devem ser positivas.")
        if self.node_size <= 0 or self.level_gap <= 0:
            raise ValueError("node_size e level_gap devem ser positivos.")
        if self.search_step_delay_ms < 0:
            raise ValueError("O atraso da busca não pode ser negativo.")
        if self.log_max_lines <= 0:
            raise ValueError("O log precisa de pelo menos uma linha.")

    @property
    def search_step_delay(self) -> float:
        """Atraso em segundos (para time.sleep)."""
        return self.search_step_delay_ms / 1000.0
