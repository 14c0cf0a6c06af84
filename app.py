import numpy as np
import streamlit as st
import plotly.graph_objects as go

from sequence import Sequence
from main import parse_terms, preview_table, DEFAULT_PREVIEW
from math_details import latex_coefficients


# =========================
# CONFIG
# =========================
st.set_page_config(page_title="Formule d'une suite", layout="wide")
st.title("Formule d'une suite — interpolation de Newton")

# =========================
# Sidebar
# =========================
text = st.sidebar.text_input("Termes (séparés par des virgules)", "1, 4, 9, 16")
count = st.sidebar.slider("Nombre de termes à afficher", 1, 50, DEFAULT_PREVIEW)

try:
    sequence = Sequence(*parse_terms(text))
except ValueError as e:
    st.error(f"Entrée invalide : {e}")
    st.stop()

st.success(f"{len(sequence)} terme(s) — polynôme de degré {sequence.degree}")

# =========================
# Formule
# =========================
st.subheader("Formule")
st.latex(sequence.to_latex())
st.code(sequence.to_formula().strip(), language=None)

coefs = latex_coefficients(sequence)
if coefs:
    st.markdown("**Coefficients**")
    for c in coefs:
        st.latex(c)

# =========================
# Aperçu
# =========================
st.subheader("Premiers termes")
rows = preview_table(sequence, count)
st.dataframe({"n": [n for n, _ in rows], "f(n)": [v for _, v in rows]}, hide_index=True)

values = np.array([v for _, v in rows], float)
if not np.all(np.isfinite(values)):
    st.warning("Certaines valeurs ne sont pas finies (terme non numérique ?).")

n_dense = np.linspace(1, count, 400)
fig = go.Figure()
fig.add_trace(go.Scatter(x=n_dense, y=[sequence.evaluate(n) for n in n_dense], mode="lines",
                         name="Polynôme", line=dict(color="green")))
fig.add_trace(go.Scatter(x=list(range(1, len(sequence) + 1)), y=list(sequence.terms), mode="markers",
                         name="Termes donnés", marker=dict(color="orange", size=8)))
fig.update_layout(xaxis_title="n", yaxis_title="f(n)")
st.plotly_chart(fig, use_container_width=True)
