#!/usr/bin/env python3
"""
Benchmark graph generator - times discrete-log recovery across bit widths and
worker counts and plots the latency/CPU trade-off.

Usage:
    python3 generate_graphs.py <bit_start> [bit_end] [--threads 1 2 4 8]
"""

import argparse
import sys
import time
from pathlib import Path

try:
    import matplotlib.pyplot as plt
    import matplotlib
    matplotlib.use('Agg')
except ImportError:
    print("Error: matplotlib not installed. Run: pip3 install 'babygiant[graphs]'")
    sys.exit(1)

from babygiant import embed_plaintext, recover

COLORS = ['#e74c3c', '#3498db', '#2ecc71', '#f39c12', '#9b59b6', '#34495e']


def time_recovery(bits: int, threads: int) -> float:
    """Time recovery of the worst-case plaintext (2^bits - 1) for one configuration."""
    plaintext = (1 << bits) - 1
    x, y = embed_plaintext(plaintext)
    start = time.perf_counter()
    found = recover(x, y, threads, max_bitwidth=bits)
    elapsed = time.perf_counter() - start
    if found != plaintext:
        raise RuntimeError(f"Recovered {found}, expected {plaintext}")
    return elapsed


def generate_benchmark_graphs(bit_start: int, bit_end: int, thread_counts):
    """Collect timings and write linear + log scale plots under graphs/."""
    bit_widths = list(range(bit_start, bit_end + 1, 2))

    print(f"Collecting timings for {bit_start}-{bit_end} bits, workers {thread_counts}...")
    plot_data = {n: [] for n in thread_counts}
    for bits in bit_widths:
        print(f"  Testing {bits}-bit...", end='', flush=True)
        for n in thread_counts:
            plot_data[n].append(time_recovery(bits, n))
        print(" ✓")

    output_dir = Path('graphs')
    output_dir.mkdir(exist_ok=True)

    print("\nGenerating graphs...")
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 6))

    for idx, n in enumerate(thread_counts):
        color = COLORS[idx % len(COLORS)]
        ax1.plot(bit_widths, plot_data[n], marker='o', label=f'{n} workers',
                 color=color, linewidth=2, markersize=6)
        ax2.plot(bit_widths, plot_data[n], marker='o', label=f'{n} workers',
                 color=color, linewidth=2, markersize=6)

    ax1.set_xlabel('Plaintext Bit Width', fontsize=12)
    ax1.set_ylabel('Time (seconds)', fontsize=12)
    ax1.set_title(f'BSGS Recovery Time ({bit_start}-{bit_end} bits)', fontsize=14, fontweight='bold')
    ax1.legend(loc='upper left', fontsize=10)
    ax1.grid(True, alpha=0.3)

    ax2.set_xlabel('Plaintext Bit Width', fontsize=12)
    ax2.set_ylabel('Time (seconds, log scale)', fontsize=12)
    ax2.set_title('BSGS Recovery Time - Log Scale', fontsize=14, fontweight='bold')
    ax2.set_yscale('log')
    ax2.legend(loc='upper left', fontsize=10)
    ax2.grid(True, alpha=0.3, which='both')

    plt.tight_layout()
    output_file = output_dir / f'recovery_{bit_start}_{bit_end}bit.png'
    plt.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close()

    print(f"  ✓ Saved: {output_file}")
    return output_file


def main():
    parser = argparse.ArgumentParser(description="Benchmark BSGS discrete-log recovery")
    parser.add_argument("bit_start", type=int)
    parser.add_argument("bit_end", type=int, nargs="?")
    parser.add_argument("--threads", type=int, nargs="+", default=[1, 2, 4, 8])
    args = parser.parse_args()

    bit_end = args.bit_end if args.bit_end is not None else args.bit_start

    print("=" * 70)
    print("BSGS Discrete-Log Benchmark Graph Generator")
    print("=" * 70)

    generate_benchmark_graphs(args.bit_start, bit_end, args.threads)

    print("\n" + "=" * 70)
    print("✓ Graph generation complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
