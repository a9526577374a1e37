import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="Profile-to-Résumé")

import json
import logging

from config import DEFAULT_MODEL, LLM_PROVIDER, PROVIDERS, backend_for_key
from errors import ResumeError, InvocationError
from llm_client import make_invoker
from pipeline import generate_resume
from utils import setup_logging

setup_logging()
log = logging.getLogger("gui")

PROVIDER_LABELS = {"openai": "OpenAI", "groq": "Groq", "ollama": "Ollama (local)"}

# Available models for each provider
MODEL_OPTIONS = {
    "openai": ["gpt-4o-mini", "gpt-4o", "gpt-4-turbo", "gpt-3.5-turbo"],
    "groq": ["llama-3.3-70b-versatile", "llama-3.1-8b-instant", "mixtral-8x7b-32768"],
    "ollama": ["deepseek-coder-v2", "llama3.1:8b", "qwen2.5:7b", "mistral:7b"],
}

STAGE_PROGRESS = {
    "extracting": (10, "📄 Extracting text from PDF..."),
    "invoking": (35, "🤖 Structuring your profile with AI..."),
    "rendering": (85, "🏗️ Building résumé from structured data..."),
    "done": (100, "✅ Résumé generated successfully!"),
}

# Initialize session state variables
if "generated_html" not in st.session_state:
    st.session_state.generated_html = ""
if "resume_json" not in st.session_state:
    st.session_state.resume_json = None
if "last_error" not in st.session_state:
    st.session_state.last_error = None
if "last_api_key" not in st.session_state:
    st.session_state.last_api_key = ""
if "provider_select" not in st.session_state:
    st.session_state.provider_select = LLM_PROVIDER if LLM_PROVIDER in PROVIDERS else "openai"

st.title("📄 → 📝 Profile-to-Résumé")
st.markdown("Turn your LinkedIn profile PDF into a clean, ATS-friendly HTML résumé")


# --- Helper to clear relevant state for new processing ---
def reset_generation_output_state():
    st.session_state.generated_html = ""
    st.session_state.resume_json = None
    st.session_state.last_error = None


# --- LLM PROVIDER AND MODEL SELECTION ---
st.markdown("### 🤖 AI Model Configuration")

api_key = st.text_input(
    "API key",
    type="password",
    help="OpenAI keys and Groq keys (gsk_...) are both accepted. Leave empty to use the environment or a local Ollama.",
)

if api_key.strip() and api_key != st.session_state.last_api_key:
    # a newly pasted key decides the hosted backend
    st.session_state.last_api_key = api_key
    st.session_state.provider_select = backend_for_key(api_key)

col_provider, col_model = st.columns([1, 2])

with col_provider:
    provider = st.selectbox(
        "Provider",
        options=list(PROVIDERS),
        format_func=PROVIDER_LABELS.get,
        key="provider_select",
        help="Choose a hosted API or a local Ollama model",
    )

with col_model:
    # one widget per provider so a stale model name never leaks across
    model = st.selectbox(
        "Model",
        options=MODEL_OPTIONS[provider],
        index=MODEL_OPTIONS[provider].index(DEFAULT_MODEL[provider]),
        key=f"model_select_{provider}",
    )

st.divider()


# --- Generation Logic ---
def trigger_resume_generation(pdf_bytes: bytes):
    reset_generation_output_state()

    progress_bar = st.progress(0, text="Starting...")

    def on_stage(stage: str):
        value, label = STAGE_PROGRESS[stage]
        progress_bar.progress(value, text=label)

    try:
        invoke = make_invoker(provider, api_key.strip() or None, model)
        result = generate_resume(pdf_bytes, invoke, progress=on_stage)
    except ResumeError as e:
        log.warning("Generation failed: %s", e)
        st.session_state.last_error = e
        progress_bar.empty()
        return

    st.session_state.generated_html = result.html
    st.session_state.resume_json = result.resume.to_json_dict()


uploaded_pdf = st.file_uploader("Upload your LinkedIn profile PDF", type="pdf")

if st.button("✨ Generate résumé", type="primary", disabled=uploaded_pdf is None):
    trigger_resume_generation(uploaded_pdf.getvalue())

# --- Error Area ---
if st.session_state.last_error is not None:
    err = st.session_state.last_error
    label = "Model call failed" if isinstance(err, InvocationError) else "Could not build the résumé"
    st.error(f"{label}: {err}")
    if err.raw:
        with st.expander("🔍 Offending model output"):
            st.code(err.raw)

# --- Display Area ---
if st.session_state.generated_html:
    st.subheader("🎯 Your Résumé")

    st.download_button(
        label="📥 Download",
        data=st.session_state.generated_html,
        file_name="resume.html",
        mime="text/html",
        help="Download the résumé as an HTML file",
    )

    col_main, col_info = st.columns([3, 1])
    with col_main:
        st.components.v1.html(st.session_state.generated_html, height=800, scrolling=True)
    with col_info:
        st.markdown("**🧾 Structured data**")
        st.json(st.session_state.resume_json)
        st.download_button(
            label="⬇️ JSON",
            data=json.dumps(st.session_state.resume_json, ensure_ascii=False, indent=2),
            file_name="resume.json",
            mime="application/json",
        )
