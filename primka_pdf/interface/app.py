"""
Primka PDF - Streamlit interface

Upload a CSV/XLSX export, type a receipt number and download the PDF.
Run with: streamlit run primka_pdf/interface/app.py
"""

import streamlit as st

from primka_pdf.config import PDF_MIME_TYPE, load_settings
from primka_pdf.domain import EmptySelectionError, PrimkaError, SinkError
from primka_pdf.interface.tables import receipt_summary, records_to_frame
from primka_pdf.interface.upload import upload_key
from primka_pdf.output import DirectorySink
from primka_pdf.processor import (
    build_receipt_pdf,
    load_records,
    sanitize_receipt_number,
    select_receipt,
)

# ============================================================================
# PAGE CONFIG
# ============================================================================
st.set_page_config(
    page_title="Primka PDF",
    page_icon="📄",
    layout="wide",
    initial_sidebar_state="collapsed",
)

settings = load_settings()

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================
if "records" not in st.session_state:
    st.session_state.records = []
if "source_name" not in st.session_state:
    st.session_state.source_name = None
if "source_key" not in st.session_state:
    st.session_state.source_key = None
if "document" not in st.session_state:
    st.session_state.document = None

# ============================================================================
# MAIN APP FLOW
# ============================================================================
st.header("Primka PDF (CSV/XLSX)")

uploaded_file = st.file_uploader("Učitaj CSV/XLSX", type=["csv", "txt", "xlsx"])

current_key = upload_key(uploaded_file)

if current_key is None:
    st.session_state.records = []
    st.session_state.source_name = None
    st.session_state.source_key = None
    st.session_state.document = None
elif current_key != st.session_state.source_key:
    st.session_state.document = None
    st.session_state.source_key = current_key
    try:
        st.session_state.records = load_records(
            uploaded_file.getvalue(),
            uploaded_file.name,
            mime_type=uploaded_file.type,
            settings=settings,
        )
        st.session_state.source_name = uploaded_file.name
    except PrimkaError as e:
        st.session_state.records = []
        st.session_state.source_name = None
        st.error(f"Greška pri učitavanju: {e}")

records = st.session_state.records
if st.session_state.source_name:
    st.info(f"Učitano: {len(records)} redaka")
    with st.expander("Primke u datoteci"):
        st.dataframe(receipt_summary(records), hide_index=True)

receipt_number = sanitize_receipt_number(st.text_input("Broj primke", max_chars=20))

generate = st.button(
    "Generiraj PDF",
    type="primary",
    disabled=not (records and receipt_number),
)

if generate:
    st.session_state.document = None
    try:
        selected = select_receipt(records, receipt_number)
        with st.spinner("📄 Generiranje PDF-a..."):
            st.session_state.document = build_receipt_pdf(receipt_number, selected, settings)
        st.dataframe(records_to_frame(selected), hide_index=True)
    except EmptySelectionError:
        st.warning(f"Nema redaka za primku {receipt_number}")
    except PrimkaError as e:
        st.error(f"PDF nije spremljen: {e}")

# ============================================================================
# RESULTS SECTION
# ============================================================================
document = st.session_state.document
if document is not None:
    st.success(
        f"✅ {document.filename}: {document.row_count} redaka, {document.page_count} str., "
        f"ukupno {document.totals.total_value_text} EUR"
    )

    st.download_button(
        label="📥 Preuzmi PDF",
        data=document.content,
        file_name=document.filename,
        mime=PDF_MIME_TYPE,
        type="primary",
        key="download_pdf",
    )

    if st.button("Spremi u izlaznu mapu"):
        try:
            location = DirectorySink(settings.output_dir).save(document.filename, document.content)
            st.success(f"PDF spremljen: {location}")
        except SinkError as e:
            st.error(f"PDF nije spremljen: {e}")
