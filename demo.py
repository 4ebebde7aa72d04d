"""
Rebuild-on-delete BST Demo — Reference scenario, height analysis, and visualizations.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import os
import sys
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from binary_tree import Node, Traversal
from middle_out import middle_out

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)


def node_positions(root):
    """Map each value to (x, y): x is its in-order rank, y is minus its depth."""
    positions = {}
    rank = 0
    stack = []
    node, depth = root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        positions[node.value] = (rank, -depth)
        rank += 1
        node, depth = node.right, depth + 1
    return positions


def draw_tree(ax, root, title):
    positions = node_positions(root)
    stack = [root]
    while stack:
        node = stack.pop()
        x, y = positions[node.value]
        for child in (node.left, node.right):
            if child is not None:
                cx, cy = positions[child.value]
                ax.plot([x, cx], [y, cy], "-", color="gray", linewidth=1.5, zorder=1)
                stack.append(child)
    xs = [p[0] for p in positions.values()]
    ys = [p[1] for p in positions.values()]
    ax.scatter(xs, ys, s=600, color="steelblue", edgecolors="black", zorder=2)
    for value, (x, y) in positions.items():
        ax.text(x, y, str(value), ha="center", va="center", color="white",
                fontsize=11, fontweight="bold", zorder=3)
    ax.set_title(f"{title} (height {root.height()})")
    ax.set_xlim(min(xs) - 1, max(xs) + 1)
    ax.set_ylim(min(ys) - 0.7, 0.7)
    ax.axis("off")


def example_1_reference_scenario():
    """Insert 4, 2, 1, 3, 6, 5, 7 and delete a leaf, an internal node and the root."""
    print("=" * 60)
    print("Example 1: Reference Scenario")
    print("=" * 60)

    root = Node(4)
    for value in [2, 1, 3, 6, 5, 7]:
        root.insert(value)

    print(f"In-order:  {root.get_values(Traversal.IN_ORDER)}")
    print(f"Pre-order: {root.get_values(Traversal.PRE_ORDER)}")
    for target, kind in [(3, "leaf"), (6, "internal"), (4, "root")]:
        tree = root.delete(target)
        print(f"Delete {target} ({kind}): in-order = {tree.get_values(Traversal.IN_ORDER)}, "
              f"pre-order = {tree.get_values(Traversal.PRE_ORDER)}")

    rebuilt = root.delete(4)

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    draw_tree(axes[0], root, "Original")
    draw_tree(axes[1], rebuilt, "After delete(4)")
    fig.suptitle("Deleting the root rebuilds the tree middle-out")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_reference_scenario.png", dpi=150)
    plt.close(fig)

    return fig, rebuilt


def example_2_degenerate_rebuild():
    """Sorted insertion produces a linked list; one delete restores log height."""
    print("\n" + "=" * 60)
    print("Example 2: Degenerate Tree vs Rebuilt Tree")
    print("=" * 60)

    sizes = np.array([2, 4, 8, 16, 32, 64, 128, 256, 512, 1024])
    degenerate_heights = []
    rebuilt_heights = []

    for n in sizes:
        root = Node.from_values(range(int(n)))
        rebuilt = root.delete(-1)
        degenerate_heights.append(root.height())
        rebuilt_heights.append(rebuilt.height())
        print(f"n = {n:5d}: sorted-insert height = {root.height():5d}, "
              f"after delete(-1) = {rebuilt.height():3d}")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, degenerate_heights, "o-", color="tomato", label="Sorted insertion")
    ax.plot(sizes, rebuilt_heights, "s-", color="steelblue", label="After rebuild-on-delete")
    ax.plot(sizes, np.floor(np.log2(sizes)) + 1, "k--", label="floor(log2 n) + 1")
    ax.set_xscale("log", base=2)
    ax.set_yscale("log", base=2)
    ax.set_xlabel("Number of values (n)")
    ax.set_ylabel("Tree height")
    ax.set_title("Height Before and After a Rebuild")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_degenerate_rebuild.png", dpi=150)
    plt.close(fig)

    return fig, (degenerate_heights, rebuilt_heights)


def example_3_random_insertion():
    """Random insertion orders against the rebuilt height."""
    print("\n" + "=" * 60)
    print("Example 3: Random Insertion Orders")
    print("=" * 60)

    np.random.seed(SEED)
    sizes = np.array([16, 64, 256, 1024, 4096])
    n_trials = 20
    random_mean = []
    random_max = []
    rebuilt = []

    for n in sizes:
        heights = []
        for _ in range(n_trials):
            root = Node.from_values(np.random.permutation(int(n)).tolist())
            heights.append(root.height())
        balanced = Node.from_values(middle_out(list(range(int(n)))))
        random_mean.append(np.mean(heights))
        random_max.append(np.max(heights))
        rebuilt.append(balanced.height())
        print(f"n = {n:5d}: random mean = {np.mean(heights):6.2f}, "
              f"random max = {np.max(heights):3d}, middle-out = {balanced.height():3d}")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, random_mean, "o-", color="darkorange", label=f"Random order (mean of {n_trials})")
    ax.plot(sizes, random_max, "^:", color="darkorange", alpha=0.6, label="Random order (max)")
    ax.plot(sizes, rebuilt, "s-", color="steelblue", label="Middle-out order")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Number of values (n)")
    ax.set_ylabel("Tree height")
    ax.set_title("Random Insertion vs Middle-out Rebuild")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_random_insertion.png", dpi=150)
    plt.close(fig)

    return fig, (random_mean, random_max, rebuilt)


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Rebuild-on-delete BST", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Middle-out Reconstruction", fontsize=24, ha="center")
        fig.text(0.5, 0.35, "Demonstration & Analysis Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")

        summary_text = """
Deletion never splices nodes. It reads the tree out in order,
drops the target, reorders the rest middle-out and inserts
them into a fresh tree.

• Insert: plain BST descent, duplicates ignored, no rotations
• Traversal: in-order (ascending) and pre-order, fully materialized
• Delete: O(n) regardless of where the target sits

Key Findings:
  1. One delete turns a degenerate (linked-list) tree into a
     tree of height floor(log2 n) + 1
  2. Middle-out insertion always beats random insertion order
  3. The receiver is left untouched; the result shares no values
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, filename in figures_data:
            fig = plt.figure(figsize=(11, 8.5))
            fig.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = fig.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(VIZ_DIR / filename))
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 18 + "REBUILD-ON-DELETE BST DEMO" + " " * 14 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_reference_scenario()
    example_2_degenerate_rebuild()
    example_3_random_insertion()

    generate_pdf_report([
        ("Example 1: Reference Scenario", "01_reference_scenario.png"),
        ("Example 2: Degenerate Rebuild", "02_degenerate_rebuild.png"),
        ("Example 3: Random Insertion", "03_random_insertion.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
