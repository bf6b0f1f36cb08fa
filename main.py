import streamlit as st
import pandas as pd
import plotly.graph_objects as go
import random

from libwhatiftime.models import TimeUnitConfig, ConverterSelection
from libwhatiftime.derive import derive
from libwhatiftime.converter import convert, format_number, format_fixed
from libwhatiftime.narrative import build_narrative
from libwhatiftime.compare import comparison_frame
from libwhatiftime.project import to_project_json, load_project_upload
from libwhatiftime.report import generate_time_report
from libwhatiftime.units import UNIT_KEYS, TIME_UNIT_OPTIONS, MAX_UNIT_COUNT, humanize_field
from libwhatiftime.errors import ProjectFileError

UNIT_LABELS = dict(TIME_UNIT_OPTIONS)

# ═══════════════════════════════════════════════════════
#  PAGE CONFIG & THEME
# ═══════════════════════════════════════════════════════
st.set_page_config(
    page_title="What If Time — Custom Time Systems",
    page_icon="⏳",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
@import url('https://fonts.googleapis.com/css2?family=Space+Grotesk:wght@400;500;600;700&family=Inter:wght@300;400;500;600;700&family=JetBrains+Mono:wght@400;500&display=swap');

:root {
    --bg-primary:    hsl(222, 28%, 5%);
    --bg-secondary:  hsl(222, 22%, 8%);
    --bg-card:       hsl(222, 20%, 10%);
    --accent-cyan:   #38bdf8;
    --accent-teal:   #2dd4bf;
    --accent-violet: #a78bfa;
    --accent-amber:  #fbbf24;
    --text-primary:  #f0f6fc;
    --text-secondary:#94a3b8;
    --text-muted:    #64748b;
    --border:        hsl(222, 15%, 18%);
    --border-accent: rgba(56,189,248,0.25);
    --gradient-hero: linear-gradient(135deg, #fbbf24 0%, #38bdf8 55%, #a78bfa 100%);
    --glow-cyan:     0 0 24px rgba(56,189,248,0.18);
    --radius-card:   14px;
    --radius-btn:    10px;
}

html, body, [data-testid="stAppViewContainer"] {
    font-family: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif !important;
    color: var(--text-primary);
    background: var(--bg-primary);
}
[data-testid="stHeader"] { background: transparent !important; border-bottom: none !important; }

/* ── Sidebar ── */
[data-testid="stSidebar"] {
    background: var(--bg-secondary) !important;
    border-right: 1px solid var(--border) !important;
}
[data-testid="stSidebar"] * { color: var(--text-primary) !important; }
[data-testid="stSidebar"] .stRadio label {
    padding: 10px 14px !important;
    border-radius: 10px !important;
    border: 1px solid transparent !important;
    font-weight: 500 !important;
    color: var(--text-secondary) !important;
}
[data-testid="stSidebar"] .stRadio label:hover {
    background: rgba(56,189,248,0.07) !important;
    border-color: var(--border-accent) !important;
}

/* ── Cards ── */
div[data-testid="stMetric"] {
    background: var(--bg-card);
    border: 1px solid var(--border);
    border-radius: var(--radius-card);
    padding: 18px 22px;
}
div[data-testid="stMetric"] [data-testid="stMetricValue"] {
    color: var(--accent-cyan) !important;
    font-family: 'JetBrains Mono', monospace !important;
    font-size: 1.35rem !important;
}

/* ── Inputs ── */
[data-testid="stNumberInput"] input,
.stSelectbox [data-baseweb="select"] {
    background: var(--bg-card) !important;
    border-color: var(--border) !important;
    border-radius: 8px !important;
    font-family: 'JetBrains Mono', monospace !important;
}
.stDownloadButton > button {
    background: var(--bg-card) !important;
    color: var(--accent-cyan) !important;
    border: 1px solid var(--border) !important;
    border-radius: var(--radius-btn) !important;
}

/* ── Custom Components ── */
.hero-title {
    font-family: 'Space Grotesk', sans-serif;
    background: var(--gradient-hero);
    -webkit-background-clip: text; -webkit-text-fill-color: transparent;
    background-clip: text;
    font-weight: 700; font-size: 2.1rem; line-height: 1.15; margin-bottom: 0;
}
.hero-subtitle {
    color: var(--text-secondary); font-size: 0.92rem;
    font-weight: 400; margin-top: 6px; line-height: 1.6;
}
.section-badge {
    display: inline-flex; align-items: center; gap: 5px;
    background: rgba(56,189,248,0.08);
    color: var(--accent-cyan);
    border: 1px solid rgba(56,189,248,0.22);
    border-radius: 20px; padding: 4px 14px;
    font-size: 0.72rem; font-weight: 600;
    letter-spacing: 0.07em; text-transform: uppercase; margin-bottom: 10px;
}
.convert-value {
    font-family: 'JetBrains Mono', monospace;
    font-size: 1.5rem; font-weight: 700; color: var(--accent-teal);
    text-align: center; padding-top: 4px;
}
.convert-text { color: var(--text-secondary); padding-top: 10px; text-align: center; }
.param-card {
    background: var(--bg-card); border: 1px solid var(--border);
    border-radius: var(--radius-card); padding: 16px 20px; margin: 8px 0;
}
.param-card .pc-name {
    font-size: 0.72rem; text-transform: uppercase; letter-spacing: 0.08em;
    color: var(--text-muted); font-weight: 600; margin-bottom: 4px;
}
.prose-block {
    color: var(--text-secondary); font-size: 0.95rem; line-height: 1.75;
    margin-bottom: 14px;
}
.sidebar-logo {
    font-family: 'Space Grotesk', sans-serif;
    font-size: 1.5rem; font-weight: 700;
    background: var(--gradient-hero);
    -webkit-background-clip: text; -webkit-text-fill-color: transparent; background-clip: text;
}
.version-badge {
    display: inline-block; background: rgba(56,189,248,0.1);
    color: var(--accent-cyan); border: 1px solid rgba(56,189,248,0.2);
    border-radius: 20px; padding: 2px 10px;
    font-size: 0.68rem; font-weight: 600; letter-spacing: 0.05em;
}
hr { border-color: var(--border) !important; }
</style>
""", unsafe_allow_html=True)

# ── Plotly Dark Theme Template ──
PLOTLY_DARK = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(13,17,28,0.7)",
    font=dict(family="'JetBrains Mono', monospace", color="#f0f6fc", size=12),
    title=dict(font=dict(family="'Space Grotesk', sans-serif", size=15, color="#94a3b8"), x=0.02, xanchor="left"),
    xaxis=dict(gridcolor="rgba(255,255,255,0.04)", zerolinecolor="rgba(56,189,248,0.2)", tickfont=dict(size=11)),
    yaxis=dict(gridcolor="rgba(255,255,255,0.04)", zerolinecolor="rgba(56,189,248,0.2)", tickfont=dict(size=11)),
    colorway=["#38bdf8", "#fbbf24", "#a78bfa", "#34d399", "#fb7185"],
    margin=dict(l=55, r=25, t=55, b=55),
    hoverlabel=dict(
        bgcolor="rgba(22,27,42,0.95)",
        bordercolor="rgba(56,189,248,0.3)",
        font=dict(family="'JetBrains Mono', monospace", size=12, color="#f0f6fc")
    ),
    legend=dict(
        bgcolor="rgba(13,17,28,0.7)",
        bordercolor="rgba(56,189,248,0.15)",
        borderwidth=1,
        font=dict(size=11)
    )
)

# ═══════════════════════════════════════════════════════
#  SESSION STATE
# ═══════════════════════════════════════════════════════
def reset_input_key():
    """Forces the unit inputs and selectors to reload by changing their IDs."""
    st.session_state.input_key = random.randint(0, 100000)

if "time_units" not in st.session_state:
    st.session_state.time_units = TimeUnitConfig()
if "selection" not in st.session_state:
    st.session_state.selection = ConverterSelection()
if "input_key" not in st.session_state:
    st.session_state.input_key = 0

time_units = st.session_state.time_units
selection = st.session_state.selection

# ═══════════════════════════════════════════════════════
#  HELPERS
# ═══════════════════════════════════════════════════════
def apply_plotly_theme(fig, height=500):
    """Apply the unified dark theme to a plotly figure."""
    fig.update_layout(**PLOTLY_DARK, height=height)
    return fig

def unit_select(label, current, key):
    return st.selectbox(
        label,
        list(UNIT_KEYS),
        index=UNIT_KEYS.index(current),
        format_func=UNIT_LABELS.get,
        key=f"{key}_{st.session_state.input_key}",
        label_visibility="collapsed",
    )

# ═══════════════════════════════════════════════════════
#  SIDEBAR
# ═══════════════════════════════════════════════════════
with st.sidebar:
    st.markdown("""
    <div style="padding: 10px 4px 4px 4px;">
        <p class="sidebar-logo">⏳ What If Time</p>
        <p style="color:var(--text-secondary);font-size:0.8rem;margin-top:2px;">
            Design your own time system
        </p>
        <span class="version-badge">v1.0</span>
    </div>
    """, unsafe_allow_html=True)
    st.markdown("---")

    st.markdown('<span class="section-badge">🧭 Mode</span>', unsafe_allow_html=True)
    mode = st.radio(
        "mode",
        ["⏱️  Time Lab", "📊  Compare", "📖  Guide"],
        label_visibility="collapsed"
    )
    if "Lab" in mode:         mode = "Time Lab"
    elif "Compare" in mode:   mode = "Compare"
    else:                     mode = "Guide"

    st.markdown("---")

    # ── Project Save/Load ──
    st.markdown('<span class="section-badge">💾 Project</span>', unsafe_allow_html=True)
    st.download_button("💾  Save Project", to_project_json(time_units, selection), "whatiftime_project.json", "application/json")
    uploaded_proj = st.file_uploader("Load Project (.json)", type=["json"], label_visibility="collapsed")
    if uploaded_proj is not None:
        try:
            loaded = load_project_upload(uploaded_proj, st.session_state.get("loaded_project"))
            if loaded is not None:
                loaded_units, loaded_selection, upload_id = loaded
                st.session_state.time_units = time_units = loaded_units
                st.session_state.selection = selection = loaded_selection
                st.session_state.loaded_project = upload_id
                reset_input_key()
                st.success("✅ Project loaded!")
        except ProjectFileError as e:
            st.error(f"Failed to parse project file. {e}")

    if st.button("↺  Reset to Earth time", use_container_width=True):
        time_units.reset()
        st.session_state.selection = selection = ConverterSelection()
        reset_input_key()

# ═══════════════════════════════════════════════════════
#  TIME LAB MODE
# ═══════════════════════════════════════════════════════
if mode == "Time Lab":
    st.markdown('<p class="hero-title">⏳ What If Time</p>', unsafe_allow_html=True)
    st.markdown('<p class="hero-subtitle">Explore how time would work with different fundamental units. Adjust the values below to create your own time system and see how it compares to standard time.</p>', unsafe_allow_html=True)
    st.markdown("")

    # ── Unit Inputs ──
    st.markdown('<span class="section-badge">🔧 Your Units</span>', unsafe_allow_html=True)
    grid = st.columns(2)
    for idx, (name, value) in enumerate(time_units.fields()):
        with grid[idx % 2]:
            raw = st.number_input(
                humanize_field(name),
                min_value=1.0,
                max_value=float(MAX_UNIT_COUNT),
                value=float(value),
                step=1.0,
                format="%.12g",
                key=f"{name}_{st.session_state.input_key}",
            )
            time_units.set_field(name, raw)

    derived = derive(time_units)

    st.markdown("---")

    # ── Converter ──
    st.markdown('<span class="section-badge">🔁 Time Unit Converter</span>', unsafe_allow_html=True)
    c1, c2, c3, c4, c5 = st.columns([1.2, 1.4, 0.8, 1.6, 1.4])
    c1.markdown('<p class="convert-text">By your rules, one</p>', unsafe_allow_html=True)
    with c2:
        selection.from_unit = unit_select("From", selection.from_unit, "from_unit")
    c3.markdown('<p class="convert-text">equals</p>', unsafe_allow_html=True)
    with c5:
        selection.to_unit = unit_select("To", selection.to_unit, "to_unit")
    factor = convert(derived.unit_table, selection.from_unit, selection.to_unit)
    c4.markdown(f'<p class="convert-value">{format_number(factor)}</p>', unsafe_allow_html=True)

    st.markdown("---")

    # ── Narrative ──
    st.markdown('<span class="section-badge">📜 Understanding Your Time System</span>', unsafe_allow_html=True)
    narrative = build_narrative(time_units, derived)
    for paragraph in narrative.paragraphs():
        html = paragraph.replace("\n", "<br>")
        st.markdown(f'<div class="prose-block">{html}</div>', unsafe_allow_html=True)

    st.download_button(
        "📄  Download Report",
        generate_time_report(time_units, derived, selection),
        "whatiftime_report.txt",
    )

# ═══════════════════════════════════════════════════════
#  COMPARE MODE
# ═══════════════════════════════════════════════════════
elif mode == "Compare":
    st.markdown('<p class="hero-title">📊 Your Time vs Earth Time</p>', unsafe_allow_html=True)
    st.markdown('<p class="hero-subtitle">Real length of every unit · Ratio to the standard unit · Year-length factor</p>', unsafe_allow_html=True)
    st.markdown("")

    derived = derive(time_units)

    m1, m2, m3, m4, m5, m6 = st.columns(6)
    m1.metric("Seconds / Hour", format_number(derived.seconds_per_hour))
    m2.metric("Seconds / Day", format_number(derived.seconds_per_day))
    m3.metric("Seconds / Week", format_number(derived.seconds_per_week))
    m4.metric("Seconds / Month", format_number(derived.seconds_per_month))
    m5.metric("Seconds / Year", format_number(derived.seconds_per_year))
    m6.metric("Year Ratio", format_fixed(derived.time_ratio, 4))

    df_cmp = comparison_frame(derived)

    tab_chart, tab_table = st.tabs(["📊 Unit Lengths", "📋 Table"])
    with tab_chart:
        fig = go.Figure()
        fig.add_trace(go.Bar(x=df_cmp["Unit"], y=df_cmp["Custom (s)"], name="Your unit"))
        fig.add_trace(go.Bar(x=df_cmp["Unit"], y=df_cmp["Standard (s)"], name="Standard unit"))
        fig.update_layout(
            barmode="group",
            yaxis_type="log",
            xaxis_title="Unit",
            yaxis_title="Length (seconds, log scale)",
            title="Length of each unit in real seconds",
        )
        st.plotly_chart(apply_plotly_theme(fig, 520), use_container_width=True)

    with tab_table:
        df_show = pd.DataFrame({
            "Unit": df_cmp["Unit"],
            "Your length (s)": [format_number(v) for v in df_cmp["Custom (s)"]],
            "Standard (s)": [format_number(v) for v in df_cmp["Standard (s)"]],
            "Ratio": df_cmp["Ratio"].round(4),
        })
        st.dataframe(df_show, hide_index=True, use_container_width=True)

# ═══════════════════════════════════════════════════════
#  GUIDE MODE
# ═══════════════════════════════════════════════════════
elif mode == "Guide":
    st.markdown('<p class="hero-title">📖 User Guide</p>', unsafe_allow_html=True)
    st.markdown('<p class="hero-subtitle">How the numbers are worked out</p>', unsafe_allow_html=True)
    st.markdown("")

    g1, g2, g3 = st.columns(3)
    g1.markdown("""<div class="param-card" style="border-left:3px solid #38bdf8;">
<div class="pc-name">Step 1 — Set Your Units</div>
<p style="color:var(--text-secondary);font-size:0.87rem;margin-top:8px;line-height:1.6;">
In <strong>⏱️ Time Lab</strong>, change how many seconds make a minute, minutes an hour, and so on.
Anything below 1, or anything that is not a number, is treated as <strong>1</strong>.
</p></div>""", unsafe_allow_html=True)
    g2.markdown("""<div class="param-card" style="border-left:3px solid #fbbf24;">
<div class="pc-name">Step 2 — Convert</div>
<p style="color:var(--text-secondary);font-size:0.87rem;margin-top:8px;line-height:1.6;">
Pick two units in the converter. The result is the length of the first unit divided by the
length of the second, both measured in real seconds.
</p></div>""", unsafe_allow_html=True)
    g3.markdown("""<div class="param-card" style="border-left:3px solid #a78bfa;">
<div class="pc-name">Step 3 — Compare & Save</div>
<p style="color:var(--text-secondary);font-size:0.87rem;margin-top:8px;line-height:1.6;">
Open <strong>📊 Compare</strong> to see each unit against Earth time. Save the project as JSON
or download a plain-text report.
</p></div>""", unsafe_allow_html=True)

    st.markdown("---")
    st.markdown('<span class="section-badge">🧮 The Arithmetic</span>', unsafe_allow_html=True)
    st.markdown("""
- **Seconds per hour** = seconds per minute × minutes per hour
- **Seconds per day** = seconds per hour × hours per day
- **Seconds per week / month / year** follow the same chain
- **Year ratio** = seconds per year ÷ (60 × 60 × 24 × 365.25)

A ratio below 1 means your year is shorter than an Earth year, so more of your years pass for
every Earth year: time in your system flows *faster*.
""")

# ── Footer ──
st.markdown("---")
st.markdown("""
<div style="text-align:center; padding: 16px 0 8px 0;">
    <span class="version-badge" style="margin-right:8px;">⏳ What If Time v1.0</span>
    <span style="color:var(--text-muted);font-size:0.8rem;">Custom time units &amp; calendar explorer</span>
</div>
""", unsafe_allow_html=True)
