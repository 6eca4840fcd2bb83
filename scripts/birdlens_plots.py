import matplotlib.pyplot as plt
import matplotlib.patches as patches
import matplotlib.lines as mlines
from birdlens_data import DISTANCE_MIN_M, DISTANCE_MAX_M, MAX_FILL_PCT
from birdlens_calc import simulate, is_overfilled, format_fill

# Composition bands shaded behind the fill curve: (low, high, color, label)
COMPOSITION_BANDS = [
    (0, 10, 'tomato', 'Too Small'),
    (10, 30, 'gold', 'Environmental'),
    (30, 80, 'limegreen', 'Optimal'),
    (80, MAX_FILL_PCT, 'orange', 'Close-up'),
]


# --- PLOTTING FUNCTION (VIEWFINDER) ---
def plot_viewfinder(title, vals, subject, focal, dist_m):
    """Frame with rule-of-thirds grid and the subject drawn at its fill height."""

    fig, ax = plt.subplots(figsize=(6, 4), dpi=120)
    frame_w, frame_h = 150, 100

    ax.add_patch(patches.Rectangle((0, 0), frame_w, frame_h, facecolor='#1e293b', edgecolor='black', zorder=0))
    for i in (1, 2):
        ax.axvline(frame_w * i / 3, color='white', linestyle='-', alpha=0.15, zorder=1)
        ax.axhline(frame_h * i / 3, color='white', linestyle='-', alpha=0.15, zorder=1)

    fill = vals.fill_percentage
    bird_h = frame_h * fill / 100
    bird_w = bird_h * 0.6
    ax.add_patch(patches.Ellipse((frame_w / 2, frame_h / 2), bird_w, bird_h,
                                 facecolor=subject.color, edgecolor='black', linewidth=0.5, alpha=0.9, zorder=5))

    # Focus point
    ax.add_patch(patches.Rectangle((frame_w / 2 - 4, frame_h / 2 - 4), 8, 8, fill=False,
                                   edgecolor='white', linewidth=1, alpha=0.6, zorder=6))

    if is_overfilled(fill):
        ax.text(frame_w / 2, frame_h - 8, "Too Close! (Overfilled)", ha='center', va='center', color='white',
                fontweight='bold', zorder=10, bbox=dict(facecolor='red', edgecolor='none', alpha=0.8))

    ax.text(3, 4, f"{format_fill(fill)}% of frame height", color='white', fontsize=8, zorder=10)
    ax.text(frame_w - 3, 4, f"{focal}mm @ {dist_m}m", color='white', fontsize=8, ha='right', zorder=10)

    ax.set_title(f"{title} (Viewfinder) - {subject.name}")
    ax.set_xlim(0, frame_w)
    ax.set_ylim(0, frame_h)
    ax.set_aspect('equal', adjustable='box')
    ax.set_xticks([])
    ax.set_yticks([])
    return fig


# --- PLOTTING FUNCTION (FILL VS DISTANCE) ---
def plot_fill_curve(focal, subject, sensor, digital_crop, dist_m):

    fig, ax = plt.subplots(figsize=(6, 4), dpi=120)

    for low, high, color, label in COMPOSITION_BANDS:
        ax.axhspan(low, high, color=color, alpha=0.12, zorder=0)
        ax.text(DISTANCE_MAX_M - 1, (low + high) / 2, label, ha='right', va='center', fontsize=7, alpha=0.7)

    distances = []
    fills = []
    d = DISTANCE_MIN_M
    while d <= DISTANCE_MAX_M + 0.001:
        r = simulate(focal, d, subject.height_cm, sensor.height_mm, sensor.crop_factor, digital_crop)
        distances.append(d)
        fills.append(r.fill_percentage)
        d += 0.5

    ax.plot(distances, fills, color=subject.color, linewidth=2, zorder=3)

    current = simulate(focal, dist_m, subject.height_cm, sensor.height_mm, sensor.crop_factor, digital_crop)
    ax.plot(dist_m, current.fill_percentage, 'ko', markersize=7, zorder=5)
    ax.axvline(dist_m, color='gray', linestyle=':', alpha=0.6, zorder=2)

    ax.set_title(f"Frame Fill vs Distance ({focal}mm, {sensor.name}, {digital_crop:g}x)")
    ax.set_xlabel("Distance (m)")
    ax.set_ylabel("Frame Fill (%)")
    ax.set_xlim(DISTANCE_MIN_M, DISTANCE_MAX_M)
    ax.set_ylim(0, MAX_FILL_PCT + 10)
    ax.grid(True, linestyle=':', alpha=0.6)

    curve_handle = mlines.Line2D([], [], color=subject.color, linewidth=2, label=subject.name)
    current_handle = mlines.Line2D([], [], color='black', marker='o', linestyle='None', markersize=7,
                                   label=f"Current ({format_fill(current.fill_percentage)}%)")
    ax.legend(handles=[curve_handle, current_handle], loc='upper right', fontsize='small', framealpha=0.9)
    return fig
