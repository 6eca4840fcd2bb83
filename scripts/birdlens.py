import logging
import streamlit as st
import pandas as pd
from birdlens_data import (
    DEFAULT_BASE_PARAMS, SUBJECTS, SENSOR_FORMATS, DIGITAL_CROPS, TARGET_FILL_PCT,
    FOCAL_MIN_MM, FOCAL_MAX_MM, FOCAL_STEP_MM, DISTANCE_MIN_M, DISTANCE_MAX_M, DISTANCE_STEP_M,
    get_subject, get_sensor_format, subject_help_text
)
from birdlens_calc import (
    SimulationInput, SimulationError, compute_simulation, classify_magnification, classify_composition,
    total_crop_factor, is_overfilled, format_fill, distance_for_fill, focal_length_for_fill, snap_to_range
)
from birdlens_plots import plot_viewfinder, plot_fill_curve
from birdlens_log import setup_logging

# --- CONFIGURATION & CONSTANTS ---
st.set_page_config(page_title="Bird Lens Framing Simulator", layout="wide")
setup_logging()
logger = logging.getLogger("birdlens")

# Initialize Session State for Baseline
if 'base_params' not in st.session_state:
    st.session_state.base_params = DEFAULT_BASE_PARAMS.copy()

# --- UI SETUP ---
st.title("🐦 Bird Lens Framing Simulator")
st.caption("Visualize your lens choice before you buy the wrong focal length.")

# --- HELP SECTION ---
with st.sidebar.expander("❓ How to Use this Simulator"):
    st.markdown("""
    ### **1. Setup (Sidebar)**
    * **Subject:** Pick a small, medium or large bird.
    * **Sensor:** Full Frame or APS-C. APS-C multiplies the equivalent focal length by 1.5.
    * **Digital Crop:** In-camera crop mode. Reads out a smaller part of the sensor so the bird fills more of the frame.

    ### **2. Main Window Controls**
    * **Focal Length & Distance:** Physical lens focal length and camera-to-bird distance.
    * **Frame Subject:** Sets focal length or distance so the bird fills about half the frame height.

    ### **3. Reading the Results**
    * **Equivalent Focal Length:** Full-frame equivalent field of view after all crop factors.
    * **Binocular Magnification:** Equivalent focal length relative to a 50mm "1x" lens.
    * **Frame Fill:** Bird height as a share of the frame height (capped at 200%).
    """)

# Sidebar
st.sidebar.header("Setup")
subject_id = st.sidebar.selectbox("Subject (Size)", [s.id for s in SUBJECTS], key="subject",
                                  format_func=lambda i: f"{get_subject(i).name} - {get_subject(i).height_cm:g}cm",
                                  help=subject_help_text)
subject = get_subject(subject_id)

sensor_id = st.sidebar.radio("Camera Sensor", [s.id for s in SENSOR_FORMATS], key="sensor", horizontal=True,
                             format_func=lambda i: get_sensor_format(i).name)
sensor = get_sensor_format(sensor_id)

digital_crop = st.sidebar.radio("Digital Crop (Crop Mode)", [c.factor for c in DIGITAL_CROPS], key="digital_crop",
                                horizontal=True,
                                format_func=lambda f: next(c.label for c in DIGITAL_CROPS if c.factor == f),
                                help="In-camera crop. Uses a smaller area of the sensor.")

# --- STATE ---
if 'focal' not in st.session_state: st.session_state.focal = DEFAULT_BASE_PARAMS["focal"]
if 'distance' not in st.session_state: st.session_state.distance = DEFAULT_BASE_PARAMS["distance"]


def frame_by_focal():
    ideal_f = focal_length_for_fill(TARGET_FILL_PCT, st.session_state.distance, subject.height_cm,
                                    sensor.height_mm, digital_crop)
    st.session_state.focal = snap_to_range(ideal_f, FOCAL_MIN_MM, FOCAL_MAX_MM, FOCAL_STEP_MM)
    logger.info("Frame by focal: ideal %.0fmm -> %smm", ideal_f, st.session_state.focal)


def frame_by_distance():
    ideal_d = distance_for_fill(TARGET_FILL_PCT, st.session_state.focal, subject.height_cm,
                                sensor.height_mm, digital_crop)
    st.session_state.distance = snap_to_range(ideal_d, DISTANCE_MIN_M, DISTANCE_MAX_M, DISTANCE_STEP_M)
    logger.info("Frame by distance: ideal %.1fm -> %sm", ideal_d, st.session_state.distance)


# --- MANUAL INPUTS ---
c1, c2 = st.columns(2)
with c1:
    st.slider("Lens Focal Length (mm)", FOCAL_MIN_MM, FOCAL_MAX_MM, step=FOCAL_STEP_MM, key="focal")
    st.button("Frame Subject (Focal Only)", key="frame_focal", on_click=frame_by_focal,
              help="Picks the focal length that makes the bird fill about half the frame at the current distance.")
with c2:
    st.slider("Shooting Distance (m)", DISTANCE_MIN_M, DISTANCE_MAX_M, step=DISTANCE_STEP_M, key="distance")
    st.button("Frame Subject (Distance Only)", key="frame_distance", on_click=frame_by_distance,
              help="Finds the distance that makes the bird fill about half the frame with the current lens.")

focal = st.session_state.focal
distance = st.session_state.distance

# --- CALCULATIONS ---
try:
    vals = compute_simulation(SimulationInput(focal, distance, sensor, digital_crop, subject))
except SimulationError as e:
    logger.error("Simulation failed: %s", e)
    st.error(f"❌ {e}")
    st.stop()

mag_tier = classify_magnification(vals.magnification)
comp_tier = classify_composition(vals.fill_percentage)
crop_total = total_crop_factor(sensor.crop_factor, digital_crop)

st.divider()

m1, m2, m3 = st.columns(3)
with m1:
    st.metric("Equivalent Focal Length (FF)", f"{round(vals.equivalent_focal_length_mm)}mm")
    note = f"Physical: {focal}mm"
    if crop_total != 1.0:
        note += f" (factor: {crop_total:.1f}x)"
    st.caption(note)
with m2:
    st.metric("Binocular Magnification", f"{vals.magnification:.1f}x")
    st.caption(f"(@50mm standard) {mag_tier.label}")
with m3:
    st.metric("Frame Fill", f"{format_fill(vals.fill_percentage)}%")
    st.caption(f"{focal}mm @ {distance}m")

# --- COMPOSITION ADVICE ---
if comp_tier.status == "fail":
    st.error(f"❌ {comp_tier.label}")
elif comp_tier.status == "warn":
    st.warning(f"⚠️ {comp_tier.label}")
elif comp_tier.status == "pass":
    st.success(f"✅ {comp_tier.label}")
else:
    st.info(f"🔍 {comp_tier.label}")

if is_overfilled(vals.fill_percentage):
    st.warning("⚠️ Too Close! The bird is taller than the frame.")

# --- PLOTS ---
p1, p2 = st.columns(2)
with p1:
    st.pyplot(plot_viewfinder("Your Setup", vals, subject, focal, distance))
with p2:
    st.pyplot(plot_fill_curve(focal, subject, sensor, digital_crop, distance))

# --- RESULTS TABLE ---
base_params = st.session_state.base_params
base_subject = get_subject(base_params["subject"])
base_sensor = get_sensor_format(base_params["sensor"])
base_res = compute_simulation(SimulationInput(base_params["focal"], base_params["distance"], base_sensor,
                                              base_params["digital_crop"], base_subject))
base_comp = classify_composition(base_res.fill_percentage)

metrics = [
    ("Lens", f"{base_params['focal']}mm @ {base_params['distance']}m", f"{focal}mm @ {distance}m", "", False),
    ("Subject", base_subject.name, subject.name, "", False),
    ("Sensor / Digital Crop", f"{base_sensor.name} / {base_params['digital_crop']:g}x",
     f"{sensor.name} / {digital_crop:g}x", "", False),
    ("Equivalent Focal Length", base_res.equivalent_focal_length_mm, vals.equivalent_focal_length_mm, "mm", True),
    ("Binocular Magnification", base_res.magnification, vals.magnification, "x", True),
    ("Frame Fill", base_res.fill_percentage, vals.fill_percentage, "fill_complex", True),
]

data = []
for name, base, new_val, unit, diff in metrics:
    row = {"Metric": name, "Baseline": "", "Your Setup": "", "Change": "", "status": "neutral"}

    if unit == "fill_complex":
        row["Baseline"] = f"{format_fill(base)}% ({base_comp.name.replace('_', ' ').title()})"
        row["Your Setup"] = f"{format_fill(new_val)}% ({comp_tier.name.replace('_', ' ').title()})"
        row["Change"] = f"{new_val - base:+.1f} pts"
        row["status"] = comp_tier.status
    elif unit == "":
        row["Baseline"] = base
        row["Your Setup"] = new_val
    else:
        row["Baseline"] = f"{base:.1f}{unit}"
        row["Your Setup"] = f"{new_val:.1f}{unit}"
        if diff:
            pct = ((new_val - base) / base) * 100
            row["Change"] = f"{pct:+.1f}%"
    data.append(row)

df = pd.DataFrame(data)
def style_fn(styler):
    def color_rows(row):
        c = ''
        if row['status'] == 'pass': c = 'background-color: rgba(144, 238, 144, 0.3)'
        elif row['status'] == 'fail': c = 'background-color: rgba(255, 99, 71, 0.3)'
        elif row['status'] == 'warn': c = 'background-color: rgba(255, 215, 0, 0.25)'
        return [c] * len(row)
    return styler.apply(color_rows, axis=1)

# Dynamic height calculation to prevent scrollbars
row_height = 35
header_height = 38
total_height = (len(df) * row_height) + header_height + 5

st.dataframe(
    style_fn(df.style),
    width="stretch",
    hide_index=True,
    column_order=["Metric", "Baseline", "Your Setup", "Change"],
    height=total_height
)

b_c1, b_c2, b_c3 = st.columns([2, 1, 1])
with b_c2:
    if st.button("Reset Baseline", key="reset_baseline", help="Restores the default baseline setup."):
        st.session_state.base_params = DEFAULT_BASE_PARAMS.copy()
        st.rerun()
with b_c3:
    if st.button("Set Current as Baseline", key="set_baseline",
                 help="Updates the Baseline column to match your current setup."):
        st.session_state.base_params = {
            "subject": subject.id,
            "sensor": sensor.id,
            "digital_crop": digital_crop,
            "focal": focal,
            "distance": distance,
        }
        st.rerun()
