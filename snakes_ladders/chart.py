"""Histogram of simulated game lengths."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt


def make_length_chart(
    turns: list[int],
    output_path: str = "game_lengths.png",
    title: str = "Snakes & Ladders Game Length",
) -> str:
    """Create a histogram of turns-per-game with the mean marked.

    Returns the path to the saved PNG.
    """
    if not turns:
        raise ValueError("No finished games to chart")

    fig, ax = plt.subplots(figsize=(10, 5))
    bins = min(30, max(5, len(set(turns))))
    ax.hist(turns, bins=bins, color="#4A90D9", edgecolor="white")

    mean = sum(turns) / len(turns)
    ax.axvline(mean, color="#D94A4A", linestyle="--", linewidth=2)
    ax.text(
        mean, ax.get_ylim()[1] * 0.95, f" mean {mean:.1f}",
        color="#D94A4A", fontsize=11, fontweight="bold", va="top",
    )

    ax.set_xlabel("Turns")
    ax.set_ylabel("Games")
    ax.set_title(title, fontsize=14, fontweight="bold")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
