import os
import sys

sys.path.insert(0, os.path.abspath("../.."))

project = "weather-analyzer"
copyright = "2025, Juan Torrente"
author = "Juan Torrente"
release = "1.0"
version = "1.0"

today_fmt = "%Y-%m-%d"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",  # for Google-style docstrings
    "sphinx.ext.viewcode",
    "sphinx_autodoc_typehints",
    "sphinx.ext.mathjax",
    "rst2pdf.pdfbuilder",  # for PDF generation
]

napoleon_google_docstring = True
napoleon_numpy_docstring = False

templates_path = ["_templates"]
exclude_patterns = []

html_theme = "sphinx_rtd_theme"

pdf_documents = [
    ("index", "WeatherAnalyzerDocs", "Weather Analyzer Documentation", "Juan Torrente")
]
