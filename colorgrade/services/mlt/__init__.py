"""MLT project parsing and rewriting service."""

from colorgrade.services.mlt.filter_matcher import parse_filter, render_filter
from colorgrade.services.mlt.filtergraph_compiler import compile_filtergraphs
from colorgrade.services.mlt.document_rewriter import rewrite_document

__all__ = ["parse_filter", "render_filter", "compile_filtergraphs", "rewrite_document"]
