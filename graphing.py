# graphing.py

import numpy as np
import matplotlib.pyplot as plt
import constants as C
from perlin import noise
import logger as log

def noise_profile(start, end, samples=C.PROFILE_SAMPLES):
    """
    Samples the noise field along the straight segment from start to end.

    start and end are (x, y, z) points. Returns (t, values) where t runs
    from 0 at start to 1 at end. A profile through z alone reads as an
    animation curve.
    """
    if samples < 2:
        raise ValueError(f"A profile needs at least 2 samples, got {samples}")
    t = np.linspace(0.0, 1.0, samples)
    a = np.asarray(start, dtype=np.float64)
    b = np.asarray(end, dtype=np.float64)
    points = a + t[:, np.newaxis] * (b - a)
    values = np.array([noise(x, y, z) for x, y, z in points])
    return t, values

def plot_profile(start, end, samples, path):
    """
    Uses matplotlib to save a line graph of the noise along a segment.
    """
    t, values = noise_profile(start, end, samples)
    log.log(f"[Graphing] Generating profile plot with {samples} samples from {tuple(start)} to {tuple(end)}...")

    fig, ax = plt.subplots(figsize=C.PLOT_FIGSIZE)
    try:
        ax.plot(t, values, color=C.PLOT_LINE_COLOR, label='noise(x, y, z)')
        ax.axhline(0, color='gray', linestyle='--', linewidth=0.8)

        ax.set_title('Noise Profile')
        ax.set_xlabel('Position Along Segment (t)')
        ax.set_ylabel('Noise')
        ax.set_ylim(C.NOISE_EXPECTED_MIN, C.NOISE_EXPECTED_MAX)
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()
        fig.savefig(path, dpi=C.PLOT_DPI)
    finally:
        plt.close(fig)
    log.log(f"[Graphing] Profile plot saved to {path}")
    return t, values

def plot_histogram(values, path, bins=C.HISTOGRAM_BINS):
    """
    Uses matplotlib to save a histogram of noise samples, with the expected
    [-1, 1] range marked.
    """
    values = np.asarray(values, dtype=np.float64).ravel()
    if values.size == 0:
        raise ValueError("Cannot plot a histogram of zero samples")
    log.log(f"[Graphing] Generating histogram of {values.size} samples "
            f"(min {values.min():.4f}, max {values.max():.4f})...")

    fig, ax = plt.subplots(figsize=C.PLOT_FIGSIZE)
    try:
        ax.hist(values, bins=bins, color=C.PLOT_LINE_COLOR)
        # Mark the range the noise is expected to stay within.
        ax.axvline(C.NOISE_EXPECTED_MIN, color=C.PLOT_BOUND_COLOR, linestyle='--', linewidth=0.8, label='Expected Range')
        ax.axvline(C.NOISE_EXPECTED_MAX, color=C.PLOT_BOUND_COLOR, linestyle='--', linewidth=0.8)

        ax.set_title('Noise Sample Distribution')
        ax.set_xlabel('Noise')
        ax.set_ylabel('Samples')
        ax.legend()

        fig.tight_layout()
        fig.savefig(path, dpi=C.PLOT_DPI)
    finally:
        plt.close(fig)
    log.log(f"[Graphing] Histogram saved to {path}")
