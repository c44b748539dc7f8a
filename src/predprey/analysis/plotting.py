"""
Plotting functions for visualizing benchmark results.
"""

from typing import Dict, List

import matplotlib.pyplot as plt


def plot_fear_and_cohesion(results: List[Dict], output_file: str = "fear_cohesion.png",
                           show: bool = True) -> str:
    """
    Plot flock cohesion and average fear over time, one line per trial.

    Args:
        results: Result dictionaries, one per trial
        output_file: Output filename for the plot
        show: Open a window with the plot after saving

    Returns:
        Path to saved plot file
    """
    fig, (ax_cohesion, ax_fear) = plt.subplots(2, 1, figsize=(12, 9), sharex=True)

    for index, result in enumerate(results, start=1):
        label = f"Trial {result.get('trial', index)}"

        cohesion = result["cohesion_over_time"]
        ax_cohesion.plot([d["frame"] for d in cohesion], [d["cohesion"] for d in cohesion],
                         label=label, linewidth=2, alpha=0.8)

        fear = result["fear_over_time"]
        ax_fear.plot([d["frame"] for d in fear], [d["avg_fear"] for d in fear],
                     label=label, linewidth=2, alpha=0.8)

    ax_cohesion.set_ylabel('Cohesion (avg dist to centroid)', fontsize=10)
    ax_cohesion.set_title('Flock Cohesion', fontsize=12, fontweight='bold')
    ax_cohesion.grid(True, alpha=0.3, linestyle='--')
    ax_cohesion.legend(fontsize=8, loc='upper right')

    ax_fear.set_xlabel('Frame Number', fontsize=10)
    ax_fear.set_ylabel('Average fear magnitude', fontsize=10)
    ax_fear.set_title('Prey Fear', fontsize=12, fontweight='bold')
    ax_fear.grid(True, alpha=0.3, linestyle='--')

    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"\nPlot saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)
    return output_file


def plot_cumulative_kills(results: List[Dict], output_file: str = "cumulative_kills.png",
                          show: bool = True) -> str:
    """
    Plot cumulative predator kills over time, one line per trial.

    Args:
        results: Result dictionaries, one per trial
        output_file: Output filename for the plot
        show: Open a window with the plot after saving

    Returns:
        Path to saved plot file
    """
    fig, ax = plt.subplots(figsize=(12, 7))

    for index, result in enumerate(results, start=1):
        data = result["kills_over_time"]
        frames = [d["frame"] for d in data]
        kills = [d["kills"] for d in data]
        ax.plot(frames, kills, label=f"Trial {result.get('trial', index)}", linewidth=2)

        # Final count annotation
        if kills:
            ax.text(frames[-1], kills[-1], f' {kills[-1]}', verticalalignment='center', fontsize=9)

    ax.set_xlabel('Frame Number', fontsize=12, fontweight='bold')
    ax.set_ylabel('Cumulative Kills', fontsize=12, fontweight='bold')
    ax.set_title('Predator Kills Over Time', fontsize=14, fontweight='bold', pad=20)
    ax.legend(fontsize=11, loc='lower right', framealpha=0.9)
    ax.grid(True, alpha=0.3, linestyle='--')

    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"\nPlot saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)
    return output_file
