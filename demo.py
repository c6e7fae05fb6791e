"""
Ordered Tree Demo -- tree shapes, height under sorted vs shuffled input,
the four removal cases, and traversal visit orders.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from ordered_tree import OrderedTree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)
REPORT_PATH = Path(__file__).parent / "report.pdf"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "orange": "#f39c12",
    "purple": "#9b59b6",
    "steel": "steelblue",
    "dark": "#2c3e50",
}

BALANCED_VALUES = [50, 30, 70, 20, 40, 60, 80]
HEIGHT_SIZES = [16, 32, 64, 128, 256, 512, 1024]
HEIGHT_TRIALS = 20

all_figures = []


def save_fig(fig, name, title=None):
    fig.savefig(VIZ_DIR / name, dpi=150, bbox_inches="tight")
    all_figures.append({"fig_path": VIZ_DIR / name, "title": title or name})
    plt.close(fig)


def build(values):
    tree = OrderedTree()
    for v in values:
        tree.insert(v)
    return tree


def tree_layout(tree):
    """Map each value to (in-order index, depth) and list parent->child edges."""
    positions = {}
    edges = []
    if tree.is_empty():
        return positions, edges

    x_of = {v: i for i, v in enumerate(tree.in_order())}
    level = [tree.pre_order()[0]]
    depth = 0
    while level:
        next_level = []
        for value in level:
            positions[value] = (x_of[value], depth)
            view = tree.find_node(value)
            for child in (view.left, view.right):
                if child is not None:
                    edges.append((value, child))
                    next_level.append(child)
        level = next_level
        depth += 1
    return positions, edges


def draw_tree(ax, tree, title, highlight=None, labels=None):
    positions, edges = tree_layout(tree)
    for parent, child in edges:
        (x0, y0), (x1, y1) = positions[parent], positions[child]
        ax.plot([x0, x1], [-y0, -y1], color="gray", linewidth=1.2, zorder=1)
    for value, (x, y) in positions.items():
        color = COLORS["red"] if value == highlight else COLORS["blue"]
        ax.scatter([x], [-y], s=700, color=color, edgecolors=COLORS["dark"], zorder=2)
        ax.text(x, -y, str(value), ha="center", va="center", color="white",
                fontsize=9, fontweight="bold", zorder=3)
        if labels is not None and value in labels:
            ax.text(x, -y - 0.35, labels[value], ha="center", va="top",
                    color=COLORS["purple"], fontsize=8)
    ax.set_title(title, fontsize=10)
    ax.set_xlim(-1, max(len(positions), 1))
    ax.set_ylim(-(tree.height() + 0.2), 0.6)
    ax.axis("off")


# ─────────────────────────────────────────────────────────────
# Example 1: Shape and traversals of a balanced insertion order
# ─────────────────────────────────────────────────────────────


def example_1_balanced_shape():
    print("=" * 60)
    print("Example 1: Balanced Insertion Order")
    print("=" * 60)

    tree = build(BALANCED_VALUES)

    fig, ax = plt.subplots(figsize=(8, 4))
    draw_tree(ax, tree, f"Inserted in order {BALANCED_VALUES}")
    fig.tight_layout()
    save_fig(fig, "01_balanced_shape.png", "Tree Built From a Balanced Insertion Order")

    print(f"  Inserted:   {BALANCED_VALUES}")
    print(f"  {tree}")
    print(f"  In-order:   {tree.in_order()}")
    print(f"  Pre-order:  {tree.pre_order()}")
    print(f"  Post-order: {tree.post_order()}")
    print(f"  Duplicate insert of 40 accepted: {tree.insert(40)}")
    print()


# ─────────────────────────────────────────────────────────────
# Example 2: Height under sorted vs shuffled insertion
# ─────────────────────────────────────────────────────────────


def example_2_height_growth():
    print("=" * 60)
    print("Example 2: Height vs Element Count")
    print("=" * 60)

    sizes = np.array(HEIGHT_SIZES)
    sorted_heights = []
    shuffled_heights = []
    for n in HEIGHT_SIZES:
        sorted_heights.append(build(range(n)).height())
        trials = [build(np.random.permutation(n).tolist()).height()
                  for _ in range(HEIGHT_TRIALS)]
        shuffled_heights.append(np.mean(trials))
        print(f"  n={n:5d}  sorted height={sorted_heights[-1]:5d}  "
              f"shuffled mean height={shuffled_heights[-1]:7.2f}  "
              f"log2(n)={np.log2(n):5.2f}")

    fig, axes = plt.subplots(1, 2, figsize=(13, 4.5))

    axes[0].plot(sizes, sorted_heights, "o-", color=COLORS["red"], label="sorted input")
    axes[0].plot(sizes, shuffled_heights, "s-", color=COLORS["green"], label="shuffled input")
    axes[0].plot(sizes, np.log2(sizes) + 1, "--", color="gray", label="log2(n) + 1")
    axes[0].set_xscale("log", base=2)
    axes[0].set_yscale("log", base=2)
    axes[0].set_xlabel("Elements")
    axes[0].set_ylabel("Height")
    axes[0].set_title("Height Growth (log-log)")
    axes[0].legend(fontsize=8)
    axes[0].grid(True, alpha=0.3)

    ratio = np.array(shuffled_heights) / np.log2(sizes)
    axes[1].bar([str(n) for n in sizes], ratio, color=COLORS["steel"], alpha=0.8)
    axes[1].set_xlabel("Elements")
    axes[1].set_ylabel("Mean height / log2(n)")
    axes[1].set_title(f"Shuffled Input ({HEIGHT_TRIALS} trials per size)")
    axes[1].grid(True, alpha=0.3, axis="y")

    fig.suptitle("No Balancing: Sorted Input Degenerates to a List", fontsize=13, fontweight="bold")
    fig.tight_layout()
    save_fig(fig, "02_height_growth.png", "Height vs Element Count")

    n = HEIGHT_SIZES[-1]
    tree = build(range(n))
    start = time.perf_counter()
    for v in range(n):
        tree.contains(v)
    elapsed = time.perf_counter() - start
    print(f"  {n} lookups on the degenerate tree: {elapsed * 1000:.1f} ms")
    print()


# ─────────────────────────────────────────────────────────────
# Example 3: The four removal cases
# ─────────────────────────────────────────────────────────────


def example_3_removal_cases():
    print("=" * 60)
    print("Example 3: Removal Cases")
    print("=" * 60)

    cases = [
        ("Leaf", BALANCED_VALUES, 20),
        ("Only right child", [50, 30, 70, 35, 60, 80], 30),
        ("Only left child", [10, 5, 1], 5),
        ("Two children", BALANCED_VALUES, 50),
    ]

    fig, axes = plt.subplots(len(cases), 2, figsize=(10, 3 * len(cases)))
    for row, (name, values, target) in enumerate(cases):
        tree = build(values)
        draw_tree(axes[row][0], tree, f"{name}: before remove({target})", highlight=target)
        removed = tree.remove(target)
        draw_tree(axes[row][1], tree, f"{name}: after (removed={removed})")
        print(f"  {name:17s} remove({target}) -> {removed}  in-order: {tree.in_order()}")

    fig.suptitle("Removal: Leaf, Splice Right, Splice Left, Successor Copy",
                 fontsize=13, fontweight="bold")
    fig.tight_layout()
    save_fig(fig, "03_removal_cases.png", "The Four Removal Cases")

    tree = build(BALANCED_VALUES)
    tree.remove(50)
    print(f"  After removing the root, the successor {tree.pre_order()[0]} takes its place")
    print()


# ─────────────────────────────────────────────────────────────
# Example 4: Traversal visit order
# ─────────────────────────────────────────────────────────────


def example_4_traversal_order():
    print("=" * 60)
    print("Example 4: Traversal Visit Order")
    print("=" * 60)

    tree = build(BALANCED_VALUES)
    traversals = [
        ("In-order", tree.in_order()),
        ("Pre-order", tree.pre_order()),
        ("Post-order", tree.post_order()),
    ]

    fig, axes = plt.subplots(1, 3, figsize=(15, 4))
    for ax, (name, order) in zip(axes, traversals):
        labels = {v: f"#{i + 1}" for i, v in enumerate(order)}
        draw_tree(ax, tree, name, labels=labels)
        print(f"  {name:10s}: {order}")

    fig.suptitle("Visit Order of the Three Depth-First Traversals", fontsize=13, fontweight="bold")
    fig.tight_layout()
    save_fig(fig, "04_traversal_order.png", "Traversal Visit Order")

    clone = build(tree.pre_order())
    print(f"  Re-inserting the pre-order rebuilds the same shape: "
          f"{clone.pre_order() == tree.pre_order()}")
    print()


# ─────────────────────────────────────────────────────────────
# PDF Report
# ─────────────────────────────────────────────────────────────


def generate_pdf_report():
    print("=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        fig = plt.figure(figsize=(10, 7.5))
        fig.text(0.5, 0.65, "Ordered Tree", ha="center", va="center",
                 fontsize=32, fontweight="bold")
        fig.text(0.5, 0.55, "Unbalanced Binary Search Tree", ha="center", va="center",
                 fontsize=22, color="gray")
        fig.text(0.5, 0.40, "Shapes, Removal Cases and Traversals", ha="center", va="center",
                 fontsize=16)
        fig.text(0.5, 0.30, f"Seed: {SEED}", ha="center", va="center",
                 fontsize=12, color="gray")
        fig.patch.set_facecolor("white")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(10, 7.5))
        fig.text(0.5, 0.92, "Summary of Findings", ha="center", va="center",
                 fontsize=20, fontweight="bold")

        findings = [
            ("Set Semantics", "Duplicate inserts return False and leave the tree unchanged."),
            ("Height", "Shuffled input stays near a small multiple of log2(n); sorted input is a list."),
            ("Removal", "Leaf, one-child splice, or copy the right subtree minimum for two children."),
            ("In-order", "Always strictly ascending; the direct check of the ordering invariant."),
            ("Pre-order", "Re-inserting it reproduces the exact tree shape."),
            ("Post-order", "Children before parents; the order used to tear the tree down."),
        ]

        y = 0.85
        for title, desc in findings:
            fig.text(0.08, y, f"  {title}", ha="left", va="center", fontsize=11, fontweight="bold")
            fig.text(0.08, y - 0.035, f"    {desc}", ha="left", va="center", fontsize=9, color="#444444")
            y -= 0.09

        fig.patch.set_facecolor("white")
        pdf.savefig(fig)
        plt.close(fig)

        for entry in all_figures:
            fig = plt.figure(figsize=(10, 7.5))
            img = plt.imread(str(entry["fig_path"]))
            ax = fig.add_axes([0.02, 0.05, 0.96, 0.88])
            ax.imshow(img)
            ax.axis("off")
            if entry["title"]:
                fig.text(0.5, 0.97, entry["title"], ha="center", va="top",
                         fontsize=14, fontweight="bold")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved to: {REPORT_PATH}")
    print()


# ─────────────────────────────────────────────────────────────
# Main
# ─────────────────────────────────────────────────────────────


def main():
    print()
    print("*" * 60)
    print("  ORDERED TREE DEMO")
    print("  Unbalanced BST -- Shapes, Removal and Traversals")
    print("*" * 60)
    print()

    example_1_balanced_shape()
    example_2_height_growth()
    example_3_removal_cases()
    example_4_traversal_order()
    generate_pdf_report()

    print("=" * 60)
    print("All examples complete!")
    print(f"  Visualizations: {VIZ_DIR}/")
    print(f"  PDF Report:     {REPORT_PATH}")
    print("=" * 60)


if __name__ == "__main__":
    main()
