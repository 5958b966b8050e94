# src/ui/plot_renderer.py
import os
from typing import Any, List, Optional

import matplotlib.pyplot as plt
from matplotlib.patches import FancyBboxPatch

from src.core.algorithms.layout import TreeLayout
from src.core.config import VisualizerConfig
from src.core.models.snapshot import NodeSnapshot

class TreePlotRenderer:
    """
    Desenha um snapshot da AVL com matplotlib.
    Consome apenas a cópia imutável (NodeSnapshot): não conhece o motor.
    """
    def __init__(self, config: Optional[VisualizerConfig] = None):
        self.config = config or VisualizerConfig()

    def draw(self, snapshot: Optional[NodeSnapshot], ax=None, highlighted: Any = None):
        """Desenha arestas e nós no `ax` (cria uma figura nova se None). Retorna o Axes."""
        cfg = self.config
        if ax is None:
            _, ax = plt.subplots(figsize=(cfg.canvas_width / 100, cfg.canvas_height / 100))

        ax.set_xlim(0, cfg.canvas_width)
        ax.set_ylim(cfg.canvas_height, 0)   # y cresce para baixo, como no canvas
        ax.set_aspect('equal')
        ax.axis('off')

        if snapshot is None:
            return ax

        positions = TreeLayout.compute(snapshot, cfg.canvas_width, cfg.top_margin, cfg.level_gap)
        half = cfg.node_size / 2

        # 1. Arestas (presas às bordas dos quadrados)
        for parent, child in TreeLayout.edges(snapshot):
            px, py = positions[parent]
            cx, cy = positions[child]
            ax.plot([px, cx], [py + half, cy - half], color=cfg.edge_color, linewidth=2, zorder=1)

        # 2. Nós
        for value, (x, y) in positions.items():
            is_highlighted = highlighted is not None and value == highlighted
            box = FancyBboxPatch(
                (x - half, y - half), cfg.node_size, cfg.node_size,
                boxstyle="round,pad=0,rounding_size=10",
                facecolor=cfg.highlight_fill if is_highlighted else cfg.node_fill,
                edgecolor=cfg.highlight_border if is_highlighted else cfg.node_border,
                linewidth=3 if is_highlighted else 2,
                zorder=2,
            )
            ax.add_patch(box)
            ax.text(x, y, str(value), ha='center', va='center', fontsize=10,
                    fontweight='bold', color=cfg.text_color, zorder=3)
        return ax

    def save(self, snapshot: Optional[NodeSnapshot], filepath: str, highlighted: Any = None) -> str:
        """Renderiza em arquivo de imagem (PNG, SVG...) e fecha a figura."""
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig, ax = plt.subplots(figsize=(self.config.canvas_width / 100, self.config.canvas_height / 100))
        try:
            self.draw(snapshot, ax=ax, highlighted=highlighted)
            fig.savefig(filepath)
        finally:
            plt.close(fig)
        return filepath

def plot_height_growth(sizes: List[int], heights, bound=None, filepath: Optional[str] = None):
    """Gráfico altura x n, com o limite teórico opcional."""
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(sizes, heights, 'b-o', label='Altura Observada')
    if bound is not None:
        ax.plot(sizes, bound, 'r--', label='1.45 log2(n+2)')
    ax.set_xlabel('Tamanho (n)')
    ax.set_ylabel('Altura')
    ax.set_title('Crescimento da Altura da AVL')
    ax.legend()
    ax.grid(True)
    if filepath:
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(filepath)
        plt.close(fig)
        return filepath
    return fig

if __name__ == "__main__":
    # Uso: python -m src.ui.plot_renderer 30 20 40 ...
    import sys
    from src.core.simulation.visualizer import TreeVisualizer

    viz = TreeVisualizer()
    for text in sys.argv[1:] or ["30", "20", "40", "10", "25", "35", "50", "5"]:
        viz.insert_value(text)
    path = TreePlotRenderer(viz.config).save(viz.snapshot(), "data/avl_tree.png")
    print(f"Árvore salva em {path}")
