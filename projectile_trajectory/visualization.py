"""
Visualization Engine
====================
Figures built from an already computed Trajectory:
  1. Velocity components, coordinates and ballistic curve (3 panels)
  2. Animated replay with a fading trail and live readouts (GIF)

Nothing here steps the simulation; it only replays stored samples.
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
import os

from .integrator import Trajectory


# ── Style Configuration ───────────────────────────────────────────────────
STYLE = {
    'bg_color': '#0a0a0a',
    'text_color': '#e0e0e0',
    'grid_color': '#333333',
    'accent_colors': ['#00d4ff', '#ff6b35', '#00e676', '#ffeb3b',
                      '#e040fb', '#ff5252'],
    'font_family': 'monospace',
}

LEGEND_KW = dict(facecolor='#1a1a1a', edgecolor='#444', labelcolor=STYLE['text_color'])


def _apply_dark_style(fig, axes):
    """Apply consistent dark theme to figure and axes."""
    fig.patch.set_facecolor(STYLE['bg_color'])
    if not isinstance(axes, np.ndarray):
        axes = [axes]
    else:
        axes = axes.flatten()

    for ax in axes:
        ax.set_facecolor(STYLE['bg_color'])
        ax.tick_params(colors=STYLE['text_color'])
        ax.xaxis.label.set_color(STYLE['text_color'])
        ax.yaxis.label.set_color(STYLE['text_color'])
        ax.title.set_color(STYLE['text_color'])
        ax.grid(True, color=STYLE['grid_color'], alpha=0.4, linewidth=0.5)
        for spine in ax.spines.values():
            spine.set_color(STYLE['grid_color'])


def _padded_limits(values, pad: float):
    lo, hi = float(np.min(values)), float(np.max(values))
    span = hi - lo
    if span <= 0:
        span = max(abs(hi), 1.0)
    return lo - pad * span, hi + pad * span


def ensure_output_dir(path: str = 'output'):
    os.makedirs(path, exist_ok=True)
    return path


# ══════════════════════════════════════════════════════════════════════════
#  1. Velocity / Position Curves
# ══════════════════════════════════════════════════════════════════════════

def plot_results(trajectory: Trajectory, save_path: str = None) -> plt.Figure:
    """Velocity components vs time, coordinates vs time, ballistic curve."""
    fig, axes = plt.subplots(3, 1, figsize=(10, 11))
    _apply_dark_style(fig, axes)

    t = trajectory.time
    x_km = trajectory.x / 1e3
    y_km = trajectory.y / 1e3

    colors = STYLE['accent_colors']

    ax = axes[0]
    ax.plot(t, trajectory.vx, color=colors[5], linewidth=2, label='vx')
    ax.plot(t, trajectory.vy, color=colors[0], linewidth=2, label='vy')
    ax.plot(t, trajectory.speed, color=colors[3], linewidth=1.5,
            linestyle='--', label='|v|')
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Velocity (m/s)')
    ax.set_title('Velocity Components vs Time', fontweight='bold')
    ax.legend(fontsize=10, **LEGEND_KW)

    ax = axes[1]
    ax.plot(t, x_km, color=colors[5], linewidth=2, label='x')
    ax.plot(t, y_km, color=colors[0], linewidth=2, label='y')
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Coordinates (km)')
    ax.set_title('Coordinates vs Time', fontweight='bold')
    ax.legend(loc='upper left', fontsize=10, **LEGEND_KW)

    ax = axes[2]
    ax.plot(x_km, y_km, color=STYLE['text_color'], linewidth=2.5)
    idx_max = np.argmax(trajectory.y)
    ax.plot(x_km[idx_max], y_km[idx_max], '^', color=colors[3],
            markersize=10, label='Apex', zorder=5)
    ax.plot(x_km[-1], y_km[-1], 'x', color=colors[2], markersize=12,
            markeredgewidth=3, label='Impact', zorder=5)
    ax.set_xlabel('Horizontal Position (km)')
    ax.set_ylabel('Vertical Position (km)')
    ax.set_title('Ballistic Curve', fontweight='bold')
    ax.legend(loc='upper right', fontsize=10, **LEGEND_KW)

    c = trajectory.conditions
    fig.suptitle(f'v₀={c.velocity:.0f} m/s, α₀={c.elevation_deg:.0f}°'
                 + ('  [TRUNCATED]' if trajectory.truncated else ''),
                 fontsize=14, fontweight='bold', color=STYLE['text_color'])
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=STYLE['bg_color'])
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  2. Animated Trajectory (GIF)
# ══════════════════════════════════════════════════════════════════════════

def create_trajectory_animation(trajectory: Trajectory,
                                save_path: str = 'output/images/trajectory_animation.gif',
                                frames: int = 100, trail_length: int = 50) -> str:
    """Create animated GIF of the trajectory with a fading trail."""
    from matplotlib.animation import FuncAnimation, PillowWriter

    fig, ax = plt.subplots(figsize=(12, 6))
    _apply_dark_style(fig, ax)

    x_km = trajectory.x / 1e3
    y_km = trajectory.y / 1e3

    ax.set_xlim(*_padded_limits(x_km, 0.05))
    ax.set_ylim(*_padded_limits(y_km, 0.1))
    ax.set_xlabel('Horizontal Position (km)', fontsize=12)
    ax.set_ylabel('Vertical Position (km)', fontsize=12)
    ax.set_title('Projectile Trajectory', fontsize=14, fontweight='bold',
                 color=STYLE['text_color'])

    ax.plot(x_km, y_km, color='#555555', linewidth=1, alpha=0.6)
    ax.plot(x_km[-1], y_km[-1], 'x', color='#00e676', markersize=10,
            markeredgewidth=4, zorder=4)

    trail = LineCollection([], linewidths=3, zorder=3)
    ax.add_collection(trail)
    point, = ax.plot([], [], 'o', color='#ff5252', markersize=7, zorder=5)
    pos_text = ax.text(0.98, 0.94, '', transform=ax.transAxes, ha='right',
                       color='#00d4ff', fontsize=11, fontfamily=STYLE['font_family'])
    vel_text = ax.text(0.98, 0.88, '', transform=ax.transAxes, ha='right',
                       color='#ff6b35', fontsize=11, fontfamily=STYLE['font_family'])

    # Subsample for animation
    total_pts = len(x_km)
    step = max(1, total_pts // frames)
    indices = list(range(0, total_pts, step))
    if indices[-1] != total_pts - 1:
        indices.append(total_pts - 1)

    speed = trajectory.speed

    def animate(frame_idx):
        idx = indices[min(frame_idx, len(indices) - 1)]
        # trail covers the last trail_length frames, oldest segment faintest
        start = max(0, idx - trail_length * step)
        pts = np.column_stack([x_km[start:idx+1], y_km[start:idx+1]])
        segments = np.stack([pts[:-1], pts[1:]], axis=1) if len(pts) > 1 else []
        trail.set_segments(segments)
        if len(segments):
            fade = np.linspace(0.05, 1.0, len(segments))
            colors = np.zeros((len(segments), 4))
            colors[:, 0], colors[:, 1], colors[:, 2] = 1.0, 0.1, 0.01
            colors[:, 3] = fade
            trail.set_color(colors)

        point.set_data([x_km[idx]], [y_km[idx]])
        pos_text.set_text(f'x = {x_km[idx]:.2f} km, y = {y_km[idx]:.2f} km')
        vel_text.set_text(f'vx = {trajectory.vx[idx]:.2f} m/s, '
                          f'vy = {trajectory.vy[idx]:.2f} m/s, '
                          f'|v| = {speed[idx]:.2f} m/s')
        return trail, point, pos_text, vel_text

    anim = FuncAnimation(fig, animate, frames=len(indices), interval=50, blit=True)
    anim.save(save_path, writer=PillowWriter(fps=20),
              savefig_kwargs={'facecolor': STYLE['bg_color']})
    plt.close(fig)
    return save_path
