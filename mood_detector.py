# mood_detector.py
import logging

import streamlit as st

from moodflow import EmptyMoodError, Journal
from moodflow.journal import band_color_styles
from moodflow.config import configure_logging, load_settings

logger = logging.getLogger(__name__)

SUGGESTIONS = [
    "Need some rest and quiet time.",
    "Didn’t sleep much last night.",
    "This is terrible, I'm so stressed",
    "Just finished my project — so proud!",
    "Grateful for small things.",
]


@st.cache_resource(show_spinner=False)
def get_settings():
    settings = load_settings()
    configure_logging(settings)
    return settings


settings = get_settings()

st.set_page_config(page_title=settings.page_title, page_icon=settings.page_icon, layout="centered")
st.title(settings.page_title)
st.markdown("Express yourself, discover your vibe ✨")

if "journal" not in st.session_state:
    st.session_state.journal = Journal(limit=settings.history_limit)
st.session_state.setdefault("current", None)
st.session_state.setdefault("error", "")
st.session_state.setdefault("mood_text", "")


# -------------------- Callbacks --------------------
def add_entry():
    try:
        entry = st.session_state.journal.add(st.session_state.mood_text)
    except EmptyMoodError as e:
        logger.debug("Rejected blank mood text")
        st.session_state.error = str(e)
        return
    st.session_state.error = ""
    st.session_state.current = entry.sentiment
    st.session_state.mood_text = ""


def use_suggestion(text):
    st.session_state.mood_text = text
    st.session_state.error = ""
    st.session_state.current = None


def clear_text():
    st.session_state.mood_text = ""
    st.session_state.current = None


def text_changed():
    st.session_state.error = ""
    st.session_state.current = None


def clear_log():
    st.session_state.journal.clear()
    st.session_state.current = None


# -------------------- Page --------------------
if st.session_state.error:
    st.error(st.session_state.error)

st.markdown("**Try these:**")
cols = st.columns(len(SUGGESTIONS))
for i, (col, text) in enumerate(zip(cols, SUGGESTIONS)):
    col.button(text, key=f"suggestion_{i}", on_click=use_suggestion, args=(text,))

st.text_area(
    "How are you feeling?",
    key="mood_text",
    placeholder="Type your thoughts here...",
    max_chars=settings.max_chars,
    height=120,
    on_change=text_changed,
)
st.caption(f"{len(st.session_state.mood_text)} / {settings.max_chars}")

left, right = st.columns(2)
left.button("Analyze Mood", key="analyze", on_click=add_entry, type="primary")
right.button("Clear", key="clear", on_click=clear_text)

current = st.session_state.current
if current is not None:
    st.markdown(f"### {current.emoji} **{current.title}**")
    st.write(f"Score: {current.score}")
    st.info(current.insight)

st.markdown("---")
journal = st.session_state.journal
if len(journal) and st.checkbox(f"Show history ({len(journal)})", key="show_history"):
    df = journal.to_frame()
    view = df[["timestamp", "emoji", "title", "score", "text", "color"]]
    st.dataframe(
        view.style.apply(band_color_styles, axis=1),
        hide_index=True,
        column_config={"color": None},
    )
    st.download_button("Download log as CSV", data=journal.to_csv(), file_name="mood_log.csv", mime="text/csv")
    st.button("Clear log", key="clear_log", on_click=clear_log)

st.markdown("---")
st.markdown("**About:** MoodFlow scores your words against a small keyword lexicon. It's a lightweight prototype — not a medical or clinical tool.")
